"""
PlexMove - Finished download relocation tool.

Moves a downloaded movie or TV episode into a Plex-style library by:
- Detecting media type, title, year and season from the name
- Building sanitized "Title (Year)" and "Show/Season NN" destinations
- Copying with rsync while reporting aggregate progress
- Carrying subtitles along and optionally cleaning up the source
"""

__version__ = "0.1.0"
