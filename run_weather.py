"""Entry script for the interactive weather chart menu."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable

from src.commands import CommandResult, Request, RequestType, dispatch
from src.config import DATA_PATH, ChartSettings
from src.data import Dataset
from src.logging_utils import command_event, log_event, log_line
from src.models import StatMode

MENU_OPTIONS = {
    1: RequestType.HELP,
    2: RequestType.CANDLE_LIST,
    3: RequestType.CANDLE_PLOT,
    4: RequestType.HISTOGRAM,
    5: RequestType.FORECAST,
}

MENU_TEXT = [
    "1: Print help",
    "2: Compute Candlestick Data",
    "3: Plot Candlestick Data (Compute behind the scenes)",
    "4: Show Yearly Temperature Histogram",
    "5: Predict Future Temperature (Linear Regression)",
    "0: Exit",
]

MODE_TEXT = ["1: Average Temperature", "2: Max Temperature", "3: Min Temperature"]


def _parse_option(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _parse_years(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        return 0


def build_request(
    option: int,
    settings: ChartSettings,
    ask: Callable[[str], str],
) -> Request:
    """Collect the inputs a menu option needs and build its request."""
    kind = MENU_OPTIONS[option]
    if kind is RequestType.HELP:
        return Request(kind=kind, settings=settings)
    region = ask("Enter country code (e.g., GB): ").strip()
    mode = StatMode.AVERAGE
    years = 0
    if kind is RequestType.HISTOGRAM:
        mode = StatMode.from_selector(ask("\n".join(MODE_TEXT) + "\n>> "))
    elif kind is RequestType.FORECAST:
        years = _parse_years(ask("Enter the number of future years to predict: "))
    return Request(kind=kind, region=region, mode=mode, years=years, settings=settings)


def run_request(
    request: Request, dataset: Dataset, previous: CommandResult | None = None
) -> CommandResult:
    result = dispatch(request, dataset, previous)
    for line in result.lines:
        if result.ok:
            print(line)
        else:
            log_line(line)
    log_event(command_event(result))
    return result


def run_menu(
    dataset: Dataset,
    settings: ChartSettings,
    ask: Callable[[str], str] = input,
) -> None:
    previous: CommandResult | None = None
    while True:
        print("\n".join(MENU_TEXT))
        try:
            raw = ask("Type in 0-5: ")
        except EOFError:
            print("Error reading input. Exiting.")
            return
        option = _parse_option(raw)
        if option == 0:
            print("Exiting application.")
            return
        if option not in MENU_OPTIONS:
            print("Invalid choice. Choose a valid option.")
            continue
        try:
            request = build_request(option, settings, ask)
        except EOFError:
            print("Error reading input. Exiting.")
            return
        result = run_request(request, dataset, previous)
        if result.ok and result.candles:
            previous = result


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Yearly weather statistics as text charts.")
    parser.add_argument(
        "--data",
        type=Path,
        default=DATA_PATH,
        help="Path to the weather CSV (timestamp + <CODE>_temperature columns).",
    )
    parser.add_argument("--height", type=int, help="Chart height in rows.")
    parser.add_argument("--max-display", type=int, help="Maximum years drawn per chart.")
    parser.add_argument("--color", action="store_true", help="Colour chart glyphs with ANSI codes.")
    parser.add_argument(
        "--option",
        type=int,
        choices=sorted(MENU_OPTIONS),
        help="Run a single menu option and exit instead of the interactive menu.",
    )
    parser.add_argument("--region", default="", help="Region code for --option.")
    parser.add_argument("--mode", default="1", help="Histogram mode: 1/average, 2/max, 3/min.")
    parser.add_argument("--years", type=int, default=0, help="Forecast horizon in years.")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    defaults = ChartSettings.from_env()
    settings = ChartSettings(
        height=args.height if args.height is not None else defaults.height,
        max_display=args.max_display if args.max_display is not None else defaults.max_display,
        column_width=defaults.column_width,
        label_width=defaults.label_width,
        color=args.color or defaults.color,
    )

    if not args.data.exists():
        raise SystemExit(f"Error: Cannot open file {args.data}")
    dataset = Dataset.load(args.data)
    if dataset.empty:
        log_line(f"Error: Failed to read CSV data from {args.data}")

    if args.option is None:
        run_menu(dataset, settings)
        return

    request = Request(
        kind=MENU_OPTIONS[args.option],
        region=args.region.strip(),
        mode=StatMode.from_selector(args.mode),
        years=args.years,
        settings=settings,
    )
    result = run_request(request, dataset)
    if not result.ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
