"""
Video Annotate Tool

Command-line client for the Google Cloud Video Intelligence API. It consists
of these main components:
- cli.py: Typer CLI with one verb per annotation feature
- cli_commands/: Command classes that validate input and run a feature
- video_processor/: Request construction and the remote annotate call
- formatters.py / output.py: Text and JSON rendering of the results
"""

__version__ = "0.1.0"
