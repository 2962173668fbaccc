"""
Interactive menu loop.

The same loop serves two input modes:
- keyboard: answers are read with console.input()
- file replay: answers come from a text file, one answer per line, and are
  echoed after each prompt so the output reads like a keyboard session

Running out of input (Ctrl-D, or the end of the replay file) ends the session
the same way as choosing "Quit".
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dayschedule.commands import ScheduleCommands
from dayschedule.errors import ScheduleError
from dayschedule.timeofday import TimeOfDay

Reader = Callable[[str], str]

DIVIDER = "-" * 40

MENU = (
    "Select your choice from the following options:\n"
    "[1] Display schedule\n"
    "[2] Add an event\n"
    "[3] Change the start time of an event\n"
    "[4] Change the duration of an event\n"
    "[5] Change the description of an event\n"
    "[6] Remove an event\n"
    "[7] Quit\n"
)


def keyboard_reader(console: Console) -> Reader:
    return lambda prompt: console.input(prompt)


def replay_reader(console: Console, lines: Iterable[str]) -> Reader:
    """
    Build a reader that takes its answers from lines and echoes them.
    """
    it = iter(lines)

    def read(prompt: str) -> str:
        console.print(prompt, end="", markup=False, highlight=False)
        try:
            line = next(it)
        except StopIteration:
            console.print()
            raise EOFError from None
        line = line.rstrip("\r\n")
        console.print(line, markup=False, highlight=False)
        return line

    return read


def _ask_int(read: Reader, console: Console, prompt: str) -> Optional[int]:
    raw = read(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        console.print(f"Not a number: {escape(raw)}")
        return None


def _ask_time(read: Reader, console: Console, what: str) -> Optional[TimeOfDay]:
    hour = _ask_int(read, console, f"Please enter the {what} hour of the event (0-23): ")
    if hour is None:
        return None
    minute = _ask_int(read, console, f"Please enter the {what} minute of the event (0-59): ")
    if minute is None:
        return None
    try:
        return TimeOfDay(hour, minute)
    except ScheduleError as exc:
        console.print(escape(str(exc)))
        return None


def _print_schedule(commands: ScheduleCommands, console: Console) -> None:
    rows = commands.list_events()
    console.print(DIVIDER)
    console.print(f"Current schedule has {len(rows)} event(s).")
    console.print(DIVIDER)
    if not rows:
        return

    table = Table(box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Description")
    for i, _ in rows:
        ev = commands.get_event(i).value
        table.add_row(str(i), ev.start, ev.end, escape(ev.description))
    console.print(table)


def _flow_add(commands: ScheduleCommands, read: Reader, console: Console) -> None:
    start = _ask_time(read, console, "starting")
    if start is None:
        return
    end = _ask_time(read, console, "ending")
    if end is None:
        return
    if end < start:
        console.print("End Time cannot come before Start Time!")
        console.print("New event cannot be added!")
        return
    description = read("Please enter a description of the new event: ")

    res = commands.add_event(start.hour, start.minute, end.hour, end.minute, description)
    if not res.ok:
        console.print(escape(res.message))
        console.print("New event cannot be added!")
        return
    console.print(res.message)
    console.print(f"New event details: {escape(res.value.display)}")


def _pick_event(commands: ScheduleCommands, read: Reader, console: Console, prompt: str) -> Optional[int]:
    """
    Ask for an event number and show the chosen event. None if invalid.
    """
    index = _ask_int(read, console, prompt)
    if index is None:
        return None
    res = commands.get_event(index)
    if not res.ok:
        console.print("Invalid event number!")
        return None
    console.print("You selected this event:")
    console.print(escape(res.value.display))
    return index


def _report(ok: bool, message: str, console: Console) -> None:
    if ok:
        console.print("Event changed!")
    else:
        console.print(escape(message))
        console.print("Event cannot be changed!")


def _flow_move(commands: ScheduleCommands, read: Reader, console: Console) -> None:
    index = _pick_event(commands, read, console, "Please select the event number to change: ")
    if index is None:
        return
    new_start = _ask_time(read, console, "new starting")
    if new_start is None:
        return
    res = commands.move_event_start(index, new_start.hour, new_start.minute)
    _report(res.ok, res.message, console)


def _flow_duration(commands: ScheduleCommands, read: Reader, console: Console) -> None:
    index = _pick_event(commands, read, console, "Please select the event number to change: ")
    if index is None:
        return
    minutes = _ask_int(read, console, "Please enter the new duration in minutes: ")
    if minutes is None:
        return
    res = commands.resize_event(index, minutes)
    _report(res.ok, res.message, console)


def _flow_description(commands: ScheduleCommands, read: Reader, console: Console) -> None:
    index = _pick_event(commands, read, console, "Please select the event number to change: ")
    if index is None:
        return
    text = read("Please enter the new description: ")
    res = commands.rename_event(index, text)
    _report(res.ok, res.message, console)


def _flow_remove(commands: ScheduleCommands, read: Reader, console: Console) -> None:
    index = _ask_int(read, console, "Please select the event number to remove: ")
    if index is None:
        return
    res = commands.remove_event(index)
    if not res.ok:
        console.print("Invalid event number!")
        return
    console.print(res.message)
    console.print(f"Removed event details: {escape(res.value.display)}")


def run_interactive(commands: ScheduleCommands, read: Reader, console: Console) -> None:
    """
    Menu loop. Returns when the user quits or the input runs out.
    """
    console.print(DIVIDER)
    console.print("----------- DAILY SCHEDULER ------------")
    console.print(DIVIDER)

    handlers = {
        "2": _flow_add,
        "3": _flow_move,
        "4": _flow_duration,
        "5": _flow_description,
        "6": _flow_remove,
    }

    while True:
        try:
            console.print(DIVIDER)
            console.print(MENU, end="", markup=False)
            console.print(DIVIDER)
            choice = read("Enter numbers 1 to 7: ").strip()

            if choice == "7":
                console.print("Bye.")
                return
            if choice == "1":
                _print_schedule(commands, console)
            elif choice in handlers:
                handlers[choice](commands, read, console)
            else:
                console.print("Invalid choice.")
        except EOFError:
            console.print("End of input. Bye.")
            return
