import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates
from fastapi.responses import HTMLResponse
import uvicorn

from routes import audio, files
from utils.config import Settings, load_settings
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def create_app(settings: Settings) -> FastAPI:
    """Build the web app for one audio root."""
    app = FastAPI(title="Beatgraze", description="Web-based audio file player")
    app.state.settings = settings

    # Include routers
    app.include_router(files.router, prefix="/api", tags=["files"])
    app.include_router(audio.router, prefix="/audio", tags=["audio"])

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request):
        return templates.TemplateResponse(
            request,
            "index.html",
            {"title": "Beatgraze", "audio_dir": str(settings.audio_dir)},
            media_type="text/html",
        )

    return app


def build_parser() -> argparse.ArgumentParser:
    prog = Path(sys.argv[0]).name or "beatgraze"
    parser = argparse.ArgumentParser(
        prog=prog,
        description="🎵 Beatgraze - Web-based audio file player",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {prog}                    # Serve current directory on port 8080\n"
            f"  {prog} -p 3000            # Serve current directory on port 3000\n"
            f"  {prog} -d /path/to/music  # Serve specific directory\n"
            f"  {prog} /path/to/music     # Serve specific directory (positional)\n"
        ),
    )
    parser.add_argument("-p", "--port", default=None,
                        help="Port to serve on (default: 8080)")
    parser.add_argument("-d", "--dir", dest="audio_dir", default=None,
                        help="Directory to serve audio files from (default: current directory)")
    parser.add_argument("--host", default=None,
                        help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--log-level", default="info",
                        choices=["critical", "error", "warning", "info", "debug"],
                        help="Logging level (default: info)")
    parser.add_argument("directory", nargs="?", default=None,
                        help="Directory to serve; overrides --dir")
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(
            audio_dir=args.directory or args.audio_dir,
            port=args.port,
            host=args.host,
        )
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    app = create_app(settings)

    print(f"🎵 Beatgraze running at http://localhost:{settings.port}")
    print(f"📁 Serving audio files from: {settings.audio_dir}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
