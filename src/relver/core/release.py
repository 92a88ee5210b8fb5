"""Next-version computation for a component release."""

from __future__ import annotations

from typing import TYPE_CHECKING

from relver.core.commits import calculate_bump
from relver.core.version import Version, derive_next

if TYPE_CHECKING:
    from collections.abc import Sequence

    from relver.config.models import RelverConfig
    from relver.core.commits import ParsedCommit


def next_version(
    commits: Sequence[ParsedCommit],
    current_version: str,
    config: RelverConfig | None = None,
    override: str | None = None,
) -> str:
    """Calculate the next version of a component.

    Args:
        commits: Records since the last release of the component
        current_version: Version of the last release, "" if never released
        config: Configuration supplying the type-to-level mapping and the
            initial version
        override: Explicit next version; wins over the computed one

    Returns:
        Next version string. A first release gets the configured
        initial version.

    Raises:
        InvalidVersionError: If ``override`` or ``current_version`` is invalid
    """
    if override:
        Version.parse(override)
        return override

    config = _default_config(config)

    if not current_version:
        return config.version.initial_version

    return derive_next(calculate_bump(commits, config.commits), current_version)


def format_tag(
    component: str,
    version: str,
    tag_format: str | None = None,
    *,
    config: RelverConfig | None = None,
) -> str:
    """Render the git tag of a component release.

    ``{id}`` and ``{version}`` placeholders are substituted; anything else
    is kept literally. An explicit ``tag_format`` wins over
    ``config.version.tag_format``.
    """
    if tag_format is None:
        tag_format = _default_config(config).version.tag_format
    return tag_format.replace("{id}", component).replace("{version}", version)


def _default_config(config: RelverConfig | None) -> RelverConfig:
    if config is None:
        from relver.config.models import RelverConfig

        config = RelverConfig()
    return config
