"""Library placement of finished downloads."""

import queue
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Set, Tuple, Union

from loguru import logger

from plexmove.classification import classify, classify_path, extract_release_info
from plexmove.config.library import LibraryRoots
from plexmove.config.settings import DEFAULT_COPY_COMMAND, SEASON_PACK_MAX_DEPTH
from plexmove.exceptions import (
    CleanupFailed,
    DetectionFailed,
    MoveInProgress,
    NoVideoFound,
    SourceNotFound,
)
from plexmove.filesystem import (
    find_all_videos,
    find_principal_video,
    find_remaining_entries,
    find_subtitles,
    find_subtitles_for_video,
    purge_source,
    remove_moved_files,
    validate_within,
)
from plexmove.models.media import Classification, MediaKind
from plexmove.models.move import MoveOutcome, MoveRequest, ProgressEvent
from plexmove.naming import (
    format_movie_filename,
    format_subtitle_filename,
    format_tv_directory,
    format_tv_filename,
)
from plexmove.transfer import TransferJob, TransferOrchestrator


def classify_source(path: Union[str, Path]) -> Classification:
    """
    Classify a download, looking inside directories if needed.

    Season packs are often named "Show.S01.1080p" with the episode
    markers only on the files, so an unknown directory is classified
    from its first video.

    Args:
        path: Download file or directory.

    Returns:
        Best classification found (may still be unknown).
    """
    path = Path(path)
    result = classify_path(path)
    if not result.is_unknown() or not path.is_dir():
        return result

    try:
        videos = find_all_videos(path)
    except (SourceNotFound, NoVideoFound) as e:
        logger.debug(f"No video to classify in {path}: {e}")
        return result

    from_video = classify(videos[0].name)
    if from_video.is_unknown():
        return result
    logger.debug(f"Detected from {videos[0].name}: {from_video.kind.label}")
    return from_video


@dataclass
class MovePlan:
    """Destinations computed and validated before any write."""

    jobs: List[TransferJob] = field(default_factory=list)
    destination_root: Path = field(default_factory=Path)

    @property
    def total_bytes(self) -> int:
        return sum(job.size for job in self.jobs)


class Mover:
    """
    Moves finished downloads into the movie or TV library.

    One move runs at a time per instance. Classification, naming and
    path validation all happen before the first write; the copy, the
    subtitle copies and the optional cleanup follow in that order.
    """

    def __init__(
        self,
        roots: LibraryRoots,
        copy_command: Sequence[str] = DEFAULT_COPY_COMMAND,
    ) -> None:
        """
        Args:
            roots: Movie and TV library roots.
            copy_command: rsync-compatible executable used for copies.
        """
        self.roots = roots
        self.copy_command = tuple(copy_command)
        self._busy = threading.Lock()

    def move(
        self,
        request: MoveRequest,
        progress: Optional["queue.Queue[ProgressEvent]"] = None,
        cancel_event: Optional[threading.Event] = None,
        timeout: Optional[float] = None,
    ) -> MoveOutcome:
        """
        Move a download into the library.

        Args:
            request: What to move and how.
            progress: Bounded queue receiving progress events (lossy).
            cancel_event: Set to abort the copy.
            timeout: Seconds allowed for the copy, None for no limit.

        Returns:
            MoveOutcome describing what was placed where.

        Raises:
            MoveInProgress: If this Mover is already running a move.
            DetectionFailed: If the media kind is unknown.
            InvalidNamingInput: If the title is empty.
            PathEscape: If a destination leaves its library root.
            SourceNotFound: If the source does not exist.
            NoVideoFound: If the source holds no video.
            TransferFailed: If a video copy fails or is cancelled.
        """
        if not self._busy.acquire(blocking=False):
            raise MoveInProgress("A move is already running on this Mover")
        try:
            return self._move(request, progress, cancel_event, timeout)
        finally:
            self._busy.release()

    def _move(
        self,
        request: MoveRequest,
        progress: Optional["queue.Queue[ProgressEvent]"],
        cancel_event: Optional[threading.Event],
        timeout: Optional[float],
    ) -> MoveOutcome:
        source = Path(request.source_path)
        classification = request.classification

        # Detection and naming errors surface before touching the filesystem
        if classification.is_movie():
            format_movie_filename(classification.title, classification.year)
        elif classification.is_tv():
            format_tv_directory(classification.title, classification.season)
        else:
            raise DetectionFailed(
                f"Unknown media type for {source.name}, choose Movie or TV", classification
            )

        if not source.exists():
            raise SourceNotFound(f"Source not found: {source}")

        source_is_dir = source.is_dir()
        source_dir = source if source_is_dir else source.parent

        if classification.is_movie():
            plan = self.plan_movie(source, classification)
        else:
            plan = self.plan_tv(source, source_dir, classification, request.rename_episodes)

        logger.info(
            f"Moving {len(plan.jobs)} file(s) from {source.name} to {plan.destination_root}"
        )
        orchestrator = TransferOrchestrator(
            copy_command=self.copy_command,
            elevated=request.use_elevated_copy,
            progress=progress,
            cancel_event=cancel_event,
            timeout=timeout,
        )
        copied_subtitles = orchestrator.run(plan.jobs)

        # Subtitles whose copy failed stay in the source
        copied = set(copied_subtitles)
        moved_sources = [job.source for job in plan.jobs]
        moved_sources += [
            sub for job in plan.jobs for sub, target in job.subtitles if target in copied
        ]

        cleanup_performed = False
        remaining: List[str] = []
        if request.cleanup_after_move:
            try:
                remove_moved_files(moved_sources, source_dir, source_is_dir)
                cleanup_performed = True
            except CleanupFailed as e:
                logger.warning(str(e))
            if source_is_dir:
                remaining = find_remaining_entries(source_dir, moved_sources)

        outcome = MoveOutcome(
            moved_video_paths=[job.destination for job in plan.jobs],
            destination_root=plan.destination_root,
            media_kind=classification.kind,
            total_bytes=plan.total_bytes,
            files_moved=len(plan.jobs),
            remaining_source_entries=remaining,
            source_dir=source_dir,
            source_is_directory=source_is_dir,
            moved_subtitle_paths=copied_subtitles,
            cleanup_performed=cleanup_performed,
        )
        logger.info(f"Moved {outcome.files_moved} file(s) to {outcome.destination_root}")
        return outcome

    def plan_movie(self, source: Path, classification: Classification) -> MovePlan:
        """
        Compute the destination of a movie download.

        The largest video is placed directly under the movie library as
        "Title (Year).ext"; its subtitles follow under matching names.

        Raises:
            NoVideoFound, InvalidNamingInput, PathEscape.
        """
        root = self.roots.root_for(MediaKind.MOVIE)
        video = find_principal_video(source)
        filename = format_movie_filename(classification.title, classification.year, video.suffix)
        destination = root / filename
        validate_within(destination, root)

        if source.is_dir():
            subtitles = find_subtitles(source)
        else:
            subtitles = find_subtitles_for_video(source.parent, video, max_depth=1)

        job = TransferJob(
            source=video,
            destination=destination,
            size=video.stat().st_size,
            subtitles=self._subtitle_pairs(subtitles, video, destination, root, set()),
        )
        return MovePlan(jobs=[job], destination_root=root)

    def plan_tv(
        self,
        source: Path,
        source_dir: Path,
        classification: Classification,
        rename_episodes: bool = False,
    ) -> MovePlan:
        """
        Compute the destination of every episode in a download.

        Each file's own SxxEyy season decides its season folder; the
        requested season is only used for files without one.

        Raises:
            NoVideoFound, InvalidNamingInput, PathEscape.
        """
        root = self.roots.root_for(MediaKind.TV_EPISODE)
        subtitle_depth = SEASON_PACK_MAX_DEPTH if source.is_dir() else 1
        taken: Set[Path] = set()
        jobs = []

        for video in find_all_videos(source):
            own = classify(video.name)
            season = own.season if own.is_tv() and own.season else classification.season
            if not season:
                logger.warning(f"No season found for {video.name}, using Season 00")

            directory = root / format_tv_directory(classification.title, season)
            destination = directory / self._episode_filename(
                video, own, classification.title, season, rename_episodes
            )
            validate_within(destination, root)

            subtitles = find_subtitles_for_video(source_dir, video, subtitle_depth)
            jobs.append(TransferJob(
                source=video,
                destination=destination,
                size=video.stat().st_size,
                subtitles=self._subtitle_pairs(subtitles, video, destination, root, taken),
            ))

        # Show folder: parent of the season folders
        return MovePlan(jobs=jobs, destination_root=jobs[0].destination.parent.parent)

    @staticmethod
    def _episode_filename(
        video: Path,
        own: Classification,
        show_title: str,
        season: int,
        rename: bool,
    ) -> str:
        if not rename:
            return video.name
        if not own.episode:
            logger.warning(f"No episode number in {video.name}, keeping original name")
            return video.name
        info = extract_release_info(video.name)
        return format_tv_filename(show_title, season, own.episode, video.suffix, info.episode_title)

    @staticmethod
    def _subtitle_pairs(
        subtitles: List[Path],
        video: Path,
        destination: Path,
        root: Path,
        taken: Set[Path],
    ) -> List[Tuple[Path, Path]]:
        """Pair subtitles with unique library targets, numbering name clashes."""
        pairs = []
        for subtitle in subtitles:
            name = format_subtitle_filename(subtitle.name, video.stem, destination.stem)
            target = destination.parent / name
            counter = 1
            while target in taken:
                target = destination.parent / f"{Path(name).stem}.{counter}{Path(name).suffix}"
                counter += 1
            validate_within(target, root)
            taken.add(target)
            pairs.append((subtitle, target))
        return pairs

    def move_as_movie(
        self,
        source_path: Union[str, Path],
        title: str,
        year: Optional[int] = None,
        cleanup: bool = False,
        elevated: bool = False,
        **kwargs,
    ) -> MoveOutcome:
        """Move a download to the movie library under an explicit title."""
        classification = Classification(kind=MediaKind.MOVIE, title=title, year=year, confidence=1.0)
        request = MoveRequest(Path(source_path), classification, cleanup, elevated)
        return self.move(request, **kwargs)

    def move_as_tv(
        self,
        source_path: Union[str, Path],
        show_title: str,
        season: int = 0,
        cleanup: bool = False,
        elevated: bool = False,
        **kwargs,
    ) -> MoveOutcome:
        """Move a download to the TV library under an explicit show title."""
        classification = Classification(
            kind=MediaKind.TV_EPISODE, title=show_title, season=season, confidence=1.0
        )
        request = MoveRequest(Path(source_path), classification, cleanup, elevated)
        return self.move(request, **kwargs)

    def move_detected(self, source_path: Union[str, Path], **kwargs) -> MoveOutcome:
        """
        Move a download using its detected classification, without cleanup.

        Raises:
            DetectionFailed: If the download cannot be classified.
        """
        classification = classify_source(source_path)
        if classification.is_unknown():
            raise DetectionFailed(f"Unable to detect media type of {source_path}", classification)
        return self.move(MoveRequest(Path(source_path), classification), **kwargs)

    @staticmethod
    def purge_remaining(outcome: MoveOutcome) -> None:
        """
        Remove the whole download directory after the user confirmed it.

        Raises:
            CleanupFailed: If the download was a single file or removal fails.
        """
        if not outcome.source_is_directory:
            raise CleanupFailed(f"Refusing to purge {outcome.source_dir}: download was a single file")
        purge_source(outcome.source_dir)
