#!/usr/bin/env python3
import sys
import signal
import argparse
from datetime import datetime
from pathlib import Path

from PySide6.QtCore import QCoreApplication
from PySide6 import QtAsyncio

# Add project root to path so imports work
sys.path.append(str(Path(__file__).parent))

from core.explorer_state import ExplorerState
from core.gio_bridge.platform import GioPlatformServices
from core.preferences import Preferences
from core.types import CustomLocation, LoadStatus


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Semantic Explorer (headless session)")
    parser.add_argument("path", nargs="?", help="Folder to open", default=None)
    parser.add_argument("--show-hidden", action="store_true", help="Include hidden entries in the listing")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Directory load timeout in seconds (0 disables)")
    parser.add_argument("--add-location", metavar="PATH", help="Save PATH as a custom location")
    parser.add_argument("--label", default="", help="Label for --add-location")
    parser.add_argument("--list", action="store_true", help="Print standard and custom locations")
    return parser.parse_args(argv)


def format_row(entry) -> str:
    kind = "dir " if entry.is_directory else "file"
    size = "" if entry.size is None else f"{entry.size:>12,}"
    modified = datetime.fromtimestamp(entry.modified).strftime("%Y-%m-%d %H:%M") if entry.modified else ""
    return f"  {kind}  {size:>12}  {modified:16}  {entry.name}"


async def run_session(args) -> int:
    prefs = Preferences()
    if args.timeout is not None:
        prefs.load_timeout = args.timeout

    services = GioPlatformServices()
    state = ExplorerState(services, load_timeout=prefs.load_timeout)
    prefs.apply_to(state.view)
    if args.show_hidden:
        state.view.show_hidden = True

    state.noticeRaised.connect(lambda msg: print(f"[Notice] {msg}"))

    await state.start(args.path)
    await state.settle()

    if args.add_location:
        added = await state.locations.add(CustomLocation(path=args.add_location, label=args.label))
        print(f"{'Added' if added else 'Not added'}: {args.add_location}")

    if args.list:
        standard = await services.list_standard_locations()
        print("Locations:")
        for loc in state.locations.sidebar_items(standard):
            print(f"  {loc.display_name:20}  {loc.path}")

    load = state.loader.state
    if load.status is LoadStatus.FAILED:
        print(f"Error: {load.error}")
        return 1

    print(f"{state.current_path}:")
    for entry in state.loader.visible_entries:
        print(format_row(entry))

    prefs.capture(state.view)
    prefs.sync()
    return 0


def main():
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    args = parse_args()

    app = QCoreApplication(sys.argv)
    app.setOrganizationName("SemanticExplorer")
    app.setApplicationName("Explorer")

    # QtAsyncio bridges the Qt event loop and asyncio
    ret_code = QtAsyncio.run(run_session(args), keep_running=False, quit_qapp=True)
    sys.exit(ret_code or 0)


if __name__ == "__main__":
    main()
