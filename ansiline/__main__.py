# __main__.py

import argparse
import os
import sys
import time

from .logger import Logger
from .display.ansi import ansi
from .display.style import Color, Font, Style
from .display.terminal import MODE_VARIABLE
from .utilities import AnsiUtils

CELL = "%8.8s"
LABEL = CELL + " "
INDEX_BLACK = 0x10
INDEX_WHITE = 0xE7


def demo(logger):
    """Tour of the composer: title, colors, styles, fonts and cursor tricks."""
    ansi().title("Look, I set the title!")

    ansi().color(Color.RED).out("Hello").out(" - ").color(Color.LIGHT_GREEN).outln("%s", "World")
    ansi().color(Color.MAGENTA, Style.BOLD, background=Color.YELLOW).outln("Uuugly...")
    (ansi().color(100).out("Color Index").out(" ")
        .color((255, 165, 0)).outln("RGB Color"))
    ansi().out("[ ").color(Color.GREEN).out("OK").outln(" ] %s", "A Long Message")
    ansi().outln("Waiting...").delay(1.0).overwrite_last_line().outln("Success!")

    ansi().outln()
    for c in Color:
        ansi().color(c).out("%s", c.name).out(" ").background(c).out("%s", c.name).out(" ")
    ansi().outln()

    ansi().outln()
    for s in Style:
        ansi().style(s).out("%s", s.name).out(" ")
    ansi().outln()

    ansi().outln().style(Style.UNDERLINE, Style.BOLD, Style.BLINK).outln("Multiple styles")

    ansi().outln()
    for f in Font:
        ansi().font(f).out("%s", f.name).out(" ")
    ansi().outln().outln()

    ansi().color(Color.GREEN, Style.BOLD, Style.ITALIC, Style.UNDERLINE).outln(
        "There's a lot going on here...")

    ansi().color(Color.RED).fixed(30, 80).out("Look it's a message in space!")
    logger.debug("Demo complete")


def _shorten(color):
    return color.name.replace("LIGHT_", "L_").replace("DARK_", "D_")


def colors(names, logger):
    """Print a foreground x background table, optionally in a font and styles."""
    font = Font.DEFAULT
    styles = []
    for name in names:
        try:
            font = Font.from_name(name)
        except ValueError:
            try:
                styles.append(Style.from_name(name))
            except ValueError:
                (ansi().color(Color.RED).err("Error:")
                    .errln(" Unknown font/style %s", name)
                    .errln("\tValid fonts: %s", ", ".join(f.name for f in Font))
                    .errln("\tValid styles: %s", ", ".join(s.name for s in Style)))
                return 1

    table = list(Color)
    logger.debug(f"Color table with font={font.name} styles={[s.name for s in styles]}")

    ansi().out(LABEL, "")
    for background in table:
        ansi().out(LABEL, _shorten(background))
    ansi().outln()

    for color in table:
        ansi().out(LABEL, _shorten(color))
        for background in table:
            ansi().color(color, *styles, background=background, font=font).out(CELL, "Text ").out(" ")
        ansi().outln()
    return 0


def _cube_index(r, g, b):
    return 0x10 + 0x24 * r + 0x06 * g + b


def indexes(logger):
    """Print the 256-color palette, first in order and then grouped."""
    ansi().outln("All codes as Hex Values:")
    for i in range(256):
        ansi().background(i).out("%3X ", i)
        if i % 0x10 == 0xF:
            ansi().outln()

    ansi().outln().outln("Codes by Group")
    ansi().outln("Named colors, 0x00-0x0F")
    for i in range(0x10):
        ansi().background(i).out("   ")
        if i % 0x08 == 0x07:
            ansi().outln()

    ansi().outln().outln("RGB colors, each 0-5, 0x10-0xE7")
    # Loop order (g, r, b) prints each block as a continuous run of codes
    for row in range(2):
        ansi().outln("  0x%X-0x%-21X   0x%X-0x%-21X   0x%X-0x%X",
                     0x10 + row * 0x6C, 0x33 + row * 0x6C,
                     0x34 + row * 0x6C, 0x57 + row * 0x6C,
                     0x58 + row * 0x6C, 0x7B + row * 0x6C)
        for g in range(6):
            for column in range(3):
                r = column + row * 3
                for b in range(6):
                    text = INDEX_WHITE if r + g + b < 0x08 else INDEX_BLACK
                    ansi().color(text, background=_cube_index(r, g, b)).out(" %s%s%s ", r, g, b)
                ansi().out(" ")
            ansi().outln()
        ansi().outln()

    ansi().outln("Greyscale colors, 1-24, 0xE8-0xFF")
    for i in range(0xE8, 0x100):
        ansi().color(INDEX_WHITE if i < 0xF4 else INDEX_BLACK, background=i).out(" %2s ", i - 0xE7)
    ansi().outln()
    logger.debug("Index table complete")


def cursor(logger, lines=10):
    """Cursor movement, fixed placement and line overwriting."""
    ansi().out("\n" * lines)

    ansi().save_cursor()
    for i in range(1, 5):
        ansi().move_cursor(-i).delay(0.25).out("Move cursor: %s", i)
    for i in range(1, 5):
        ansi().move_cursor(i, i).delay(0.25).out("Move cursor: %s %s", i, i)
    ansi().restore_cursor()

    for i in range(1, 11):
        ansi().delay(0.25).fixed(i, i).out("Fixed: %s %s", i, i)

    ansi().out("\n" * lines)

    (ansi().out("A message to overwrite")
        .delay(0.5)
        .overwrite_this_line()
        .outln("Overwritten")
        .delay(0.5)
        .outln("A message on a previous line to overwrite")
        .out("And this line")
        .delay(0.5)
        .overwrite_last_line().outln("Overwritten"))
    logger.debug("Cursor demo complete")


def utils(logger):
    """Status messages and both progress bar styles."""
    ansi_utils = AnsiUtils(logger=logger)

    ansi_utils.ok("Service '%s' is accepting requests.", "Foo")
    ansi_utils.warn("Service '%s' is rejecting new requests.", "Overloaded")
    ansi_utils.error("Service '%s' is not responding.", "Broken")
    ansi().outln()
    ansi_utils.info("Starting task")
    ansi_utils.warn("Task is taking too long")
    ansi_utils.fail("Task was killed")
    ansi().outln()
    ansi_utils.done("Task %d of %d complete", 1, 3)
    ansi_utils.pass_("Test %d of %d passed", 1, 1)
    ansi_utils.skip("Task %d of %d skipped", 2, 3)
    ansi_utils.fail("Task %d of %d crashed", 3, 3)
    ansi().outln()

    progress = ansi_utils.percent_progress_bar()
    for i in range(101):
        progress.update_progress(i)
        time.sleep(0.025)
    progress.finish()

    tasks = ansi_utils.counter_progress_bar(1, " tasks")
    for i in range(3):
        tasks.update_steps(i * 100, (i + 1) * 100)
        for j in range(100):
            tasks.update_progress(i * 100 + j)
            time.sleep(0.02)
    time.sleep(0.1)
    tasks.remove()
    ansi_utils.done("All tasks complete.")


def build_parser():
    parser = argparse.ArgumentParser(
        prog='ansiline', description='Demonstrations of ansiline terminal output')
    parser.add_argument('command', nargs='?', default='demo',
        choices=['demo', 'colors', 'indexes', 'cursor', 'utils'],
        help='Which demonstration to run')
    parser.add_argument('names', nargs='*',
        help='Fonts and/or styles for the colors table, e.g. bold underline')
    parser.add_argument('--mode', choices=['real', 'raw', 'off', 'console'],
        help=f'Escape code mode, overrides ${MODE_VARIABLE}')
    parser.add_argument('--enable-logging', action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stderr)')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Must happen before the first ansi() call reads the environment
    if args.mode:
        os.environ[MODE_VARIABLE] = args.mode.upper()

    logger = Logger(__name__, args.enable_logging, args.log_file)
    logger.debug(f"Running {args.command} demo")

    if args.command == 'colors':
        return colors(args.names, logger)
    if args.names:
        build_parser().error(f"{args.command} does not accept extra arguments")
    if args.command == 'indexes':
        indexes(logger)
    elif args.command == 'cursor':
        cursor(logger)
    elif args.command == 'utils':
        utils(logger)
    else:
        demo(logger)
    return 0


if __name__ == "__main__":
    sys.exit(main())
