"""Key bindings, editor actions and command-palette command specs."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class Action(enum.Enum):
    """An action a key binding can trigger."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    SELECT_LEFT = "select_left"
    SELECT_RIGHT = "select_right"
    SELECT_UP = "select_up"
    SELECT_DOWN = "select_down"
    BACKSPACE = "backspace"
    INSERT_NEWLINE = "insert_newline"
    UNDO = "undo"
    REDO = "redo"
    NEXT_PANE = "next_pane"
    PREV_PANE = "prev_pane"
    TOGGLE_VIEW_MODE = "toggle_view_mode"
    SPLIT_PANE_RIGHT = "split_pane_right"
    SPLIT_PANE_DOWN = "split_pane_down"
    CLOSE_PANE = "close_pane"
    CANCEL = "cancel"
    CONFIRM = "confirm"
    RESIZE_SIDEBAR_LEFT = "resize_sidebar_left"
    RESIZE_SIDEBAR_RIGHT = "resize_sidebar_right"
    NEW_TAB = "new_tab"
    NEXT_TAB = "next_tab"
    PREV_TAB = "prev_tab"
    SELECT_ALL = "select_all"
    COPY = "copy"
    PASTE = "paste"
    CUT = "cut"
    OPEN_COMMAND_PALETTE = "open_command_palette"
    SEARCH_NOTES = "search_notes"
    CREATE_NOTE = "create_note"
    LIST_NOTES = "list_notes"
    SHOW_TAGS = "show_tags"
    TOGGLE_SIDEBAR = "toggle_sidebar"
    SAVE_NOTE = "save_note"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyBinding:
    """A keystroke such as ``ctrl-shift-z`` bound to an action, optionally in a context."""

    keystroke: str
    action: Action
    context: str | None = None


@dataclass(frozen=True)
class UserBinding:
    """A binding from configuration: a keystroke and an action name."""

    key: str
    action: str
    context: str | None = None


_DEFAULT_KEYS: tuple[tuple[str, Action], ...] = (
    ("left", Action.MOVE_LEFT),
    ("right", Action.MOVE_RIGHT),
    ("up", Action.MOVE_UP),
    ("down", Action.MOVE_DOWN),
    ("shift-left", Action.SELECT_LEFT),
    ("shift-right", Action.SELECT_RIGHT),
    ("shift-up", Action.SELECT_UP),
    ("shift-down", Action.SELECT_DOWN),
    ("backspace", Action.BACKSPACE),
    ("enter", Action.INSERT_NEWLINE),
    ("ctrl-z", Action.UNDO),
    ("ctrl-shift-z", Action.REDO),
    ("ctrl-shift-n", Action.NEXT_PANE),
    ("ctrl-shift-b", Action.PREV_PANE),
    ("ctrl-shift-t", Action.TOGGLE_VIEW_MODE),
    ("ctrl-shift-h", Action.SPLIT_PANE_RIGHT),
    ("ctrl-shift-v", Action.SPLIT_PANE_DOWN),
    ("ctrl-shift-q", Action.CLOSE_PANE),
    ("escape", Action.CANCEL),
    ("alt-shift-h", Action.RESIZE_SIDEBAR_LEFT),
    ("alt-shift-l", Action.RESIZE_SIDEBAR_RIGHT),
    ("alt-t", Action.NEW_TAB),
    ("alt-n", Action.NEXT_TAB),
    ("alt-b", Action.PREV_TAB),
    ("ctrl-a", Action.SELECT_ALL),
    ("ctrl-c", Action.COPY),
    ("ctrl-v", Action.PASTE),
    ("ctrl-x", Action.CUT),
)

_CONFIGURABLE_ACTIONS: dict[str, Action] = {
    "open_command_palette": Action.OPEN_COMMAND_PALETTE,
    "search_notes": Action.SEARCH_NOTES,
    "create_note": Action.CREATE_NOTE,
    "new_note": Action.CREATE_NOTE,
    "list_notes": Action.LIST_NOTES,
    "show_tags": Action.SHOW_TAGS,
    "toggle_sidebar": Action.TOGGLE_SIDEBAR,
    "resize_sidebar_left": Action.RESIZE_SIDEBAR_LEFT,
    "resize_sidebar_right": Action.RESIZE_SIDEBAR_RIGHT,
    "save_note": Action.SAVE_NOTE,
    "quit": Action.QUIT,
    "move_up": Action.MOVE_UP,
    "move_down": Action.MOVE_DOWN,
    "move_left": Action.MOVE_LEFT,
    "move_right": Action.MOVE_RIGHT,
    "backspace": Action.BACKSPACE,
    "insert_newline": Action.INSERT_NEWLINE,
    "next_pane": Action.NEXT_PANE,
    "prev_pane": Action.PREV_PANE,
    "toggle_view_mode": Action.TOGGLE_VIEW_MODE,
    "split_pane_right": Action.SPLIT_PANE_RIGHT,
    "split_pane_down": Action.SPLIT_PANE_DOWN,
    "close_pane": Action.CLOSE_PANE,
    "new_tab": Action.NEW_TAB,
    "next_tab": Action.NEXT_TAB,
    "prev_tab": Action.PREV_TAB,
    "undo": Action.UNDO,
    "redo": Action.REDO,
    "confirm": Action.CONFIRM,
    "cancel": Action.CANCEL,
    "select_all": Action.SELECT_ALL,
    "copy": Action.COPY,
    "paste": Action.PASTE,
    "cut": Action.CUT,
}


def default_bindings() -> list[KeyBinding]:
    """The built-in bindings, active in every context."""
    return [KeyBinding(key, action) for key, action in _DEFAULT_KEYS]


def action_for_name(name: str) -> Action | None:
    """The action a configuration name refers to, or None if it names none."""
    return _CONFIGURABLE_ACTIONS.get(name)


def build_bindings(user_bindings: Iterable[UserBinding]) -> list[KeyBinding]:
    """The built-in bindings followed by the user's; unknown actions are skipped."""
    bindings = default_bindings()
    for binding in user_bindings:
        action = action_for_name(binding.action)
        if action is None:
            logger.warning("unknown action in keymap: %s", binding.action)
            continue
        bindings.append(KeyBinding(binding.key, action, binding.context))
    return bindings


@dataclass(frozen=True)
class FreeText:
    """An argument typed freely, with an optional default."""

    default: str | None = None


@dataclass(frozen=True)
class Select:
    """An argument chosen from a list of options."""

    options: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ArgSpec:
    """One argument a command asks for."""

    prompt: str
    arg_type: FreeText | Select
    optional: bool = False


@dataclass(frozen=True)
class CommandSpec:
    """A command-palette command and the arguments it asks for, in order."""

    name: str
    args: list[ArgSpec] = field(default_factory=list)

    @classmethod
    def no_arg(cls, name: str) -> CommandSpec:
        """A command that takes no arguments."""
        return cls(name, [])

    @classmethod
    def with_args(cls, name: str, args: Sequence[ArgSpec]) -> CommandSpec:
        """A command that asks for the given arguments."""
        return cls(name, list(args))


def all_command_specs(
    folder_names: Sequence[str], note_titles: Sequence[str]
) -> list[CommandSpec]:
    """Every command-palette command, with options filled from folders and notes."""
    folder_options = ["(root)", *folder_names]
    folders = list(folder_names)
    notes = list(note_titles)
    confirm_delete = ArgSpec("Confirm", Select(["Cancel", "Yes, delete"]))

    return [
        CommandSpec.no_arg("Open Command Palette"),
        CommandSpec.no_arg("Search Notes"),
        CommandSpec.with_args(
            "Create Note",
            [
                ArgSpec("Note title", FreeText(), optional=True),
                ArgSpec("Folder", Select(list(folder_options)), optional=True),
            ],
        ),
        CommandSpec.with_args(
            "Create Folder",
            [
                ArgSpec("Folder name", FreeText()),
                ArgSpec("Parent folder", Select(list(folder_options)), optional=True),
            ],
        ),
        CommandSpec.with_args(
            "Move Note to Folder",
            [
                ArgSpec("Note", Select(list(notes))),
                ArgSpec("Destination", Select(list(folder_options)), optional=True),
            ],
        ),
        CommandSpec.with_args(
            "Move Folder to Folder",
            [
                ArgSpec("Folder", Select(list(folders))),
                ArgSpec("Destination", Select(list(folder_options)), optional=True),
            ],
        ),
        CommandSpec.with_args(
            "Delete Folder",
            [
                ArgSpec("Folder", Select(list(folders))),
                ArgSpec("Contents", Select(["Move notes to root", "Delete notes too"])),
                confirm_delete,
            ],
        ),
        CommandSpec.with_args(
            "Rename Folder",
            [
                ArgSpec("Folder", Select(list(folders))),
                ArgSpec("New name", FreeText()),
            ],
        ),
        CommandSpec.with_args(
            "Rename Note",
            [
                ArgSpec("Note", Select(list(notes))),
                ArgSpec("New title", FreeText()),
            ],
        ),
        CommandSpec.with_args(
            "Delete Note",
            [
                ArgSpec("Note", Select(list(notes))),
                ArgSpec("Confirm", Select(["Cancel", "Yes, delete"])),
            ],
        ),
        CommandSpec.no_arg("List Notes"),
        CommandSpec.no_arg("Show Tags"),
        CommandSpec.no_arg("Toggle Sidebar"),
        CommandSpec.no_arg("Toggle View Mode"),
        CommandSpec.no_arg("Split Pane Right"),
        CommandSpec.no_arg("Split Pane Down"),
        CommandSpec.no_arg("Close Pane"),
        CommandSpec.no_arg("New Tab"),
        CommandSpec.no_arg("Next Tab"),
        CommandSpec.no_arg("Prev Tab"),
        CommandSpec.no_arg("Save Note"),
        CommandSpec.no_arg("Quit"),
    ]