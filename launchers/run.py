import argparse
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mappoints.app.loader import load_yaml
from mappoints.app.logging_config import setup_logging
from mappoints.app.loop import run_view


def build_options(args) -> dict:
    """Collect view options from --config and the individual flags (flags win)."""
    options = {}
    if args.config:
        options.update(load_yaml(Path(args.config)).get("options") or {})
    if args.image:
        options["image"] = args.image
    if args.scale_type:
        options["scale_type"] = args.scale_type
    if args.max_points is not None:
        options["max_points"] = args.max_points
    if args.points:
        # programmatic points switch tap selection off
        options["points"] = args.points
        options["select_points_by_touching"] = False
    if args.restore:
        options["restore_points"] = True
    if args.profile:
        options["profile"] = args.profile
    return options


def main():
    parser = argparse.ArgumentParser(description="Map Points Launcher")
    parser.add_argument("--view", default="map-points", help="View folder name under views/")
    parser.add_argument("--screen", default="1280x720", help="Screen size WxH, e.g. 1280x720")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--mirror", action="store_true", help="Mirror the window horizontally")
    parser.add_argument("--debug", action="store_true", help="Overlay chain element states")
    parser.add_argument("--config", help="YAML file with an 'options' mapping overriding the manifest")
    parser.add_argument("--image", help="Background image file")
    parser.add_argument("--scale-type", choices=("fit", "center_crop", "stretch"), help="How the image fills the window")
    parser.add_argument("--max-points", type=int, help="Points to tap before the path animates")
    parser.add_argument("--points", help='Fixed points as image offsets, e.g. "40,60 200,80 220,300"')
    parser.add_argument("--restore", action="store_true", help="Replay the points saved with S")
    parser.add_argument("--profile", help="Name the saved points are stored under")
    parser.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    parser.add_argument("--log-file", help="Also write the log to this file")
    args = parser.parse_args()

    setup_logging(args.log_level, args.log_file)

    w, h = map(int, args.screen.lower().split("x"))

    run_view(
        view_id=args.view,
        screen_size=(w, h),
        fps=args.fps,
        mirror=args.mirror,
        debug=args.debug,
        options=build_options(args),
    )


if __name__ == "__main__":
    main()
