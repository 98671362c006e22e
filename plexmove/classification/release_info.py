"""Release details extracted with guessit."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

import guessit
from loguru import logger


@dataclass(frozen=True)
class ReleaseInfo:
    """Optional details used when an episode is explicitly renamed."""

    episode_title: str = ''


def extract_release_info(filename: Union[str, Path]) -> ReleaseInfo:
    """
    Extract the episode title from a release filename.

    Args:
        filename: Video filename or path.

    Returns:
        ReleaseInfo, with an empty title when guessit found none.
    """
    name = Path(filename).name
    infos = guessit.guessit(name)

    episode_title = infos.get('episode_title', '')
    if isinstance(episode_title, list):
        episode_title = episode_title[0] if episode_title else ''

    logger.debug(f"Release info for {name}: title='{episode_title}'")
    return ReleaseInfo(episode_title=str(episode_title).strip())
