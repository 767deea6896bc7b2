"""
Command.

Command is a behavioral design pattern that turns a request into a
stand-alone object that contains all information about the request. This
lets you pass requests as method arguments, delay or queue a request's
execution, and support undoable operations.

Use the Command to parametrize objects with operations, to queue or schedule
operations, or to implement reversible operations.

Identification: behavioral methods in an abstract type (the sender) invoke a
method in an implementation of a different abstract type (the receiver)
which has been encapsulated by the command.

Complexity: 1/3
Popularity: 3/3
"""
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="command",
    title="Command",
    category=PatternCategory.BEHAVIORAL,
    intent="Turn a request into a stand-alone object.",
    applicability=[
        "Parametrize objects with operations.",
        "Queue, schedule or remotely execute operations.",
        "Implement reversible operations.",
    ],
    identification="A sender invoking a receiver through an encapsulated command object.",
    complexity=1,
    popularity=3,
    reference_url="https://refactoring.guru/design-patterns/command",
))


class Editor:
    """
    The receiver: holds the actual text editing operations. All commands end
    up delegating to these methods.
    """

    def __init__(self, text: str = ""):
        self.text = text
        self.selection_start = 0
        self.selection_end = 0

    def select(self, start: int, end: int) -> None:
        start = max(0, min(start, len(self.text)))
        end = max(start, min(end, len(self.text)))
        self.selection_start = start
        self.selection_end = end

    def get_selection(self) -> str:
        return self.text[self.selection_start:self.selection_end]

    def delete_selection(self) -> None:
        self.text = self.text[:self.selection_start] + self.text[self.selection_end:]
        self.selection_end = self.selection_start

    def replace_selection(self, text: str) -> None:
        """Insert text at the cursor, replacing any selected text."""
        self.text = self.text[:self.selection_start] + text + self.text[self.selection_end:]
        self.selection_start += len(text)
        self.selection_end = self.selection_start


class Command(ABC):
    """Base command with the backup and undo logic shared by all commands."""

    def __init__(self, app: "Application", editor: Editor):
        self.app = app
        self.editor = editor
        self.backup: Optional[str] = None

    def save_backup(self) -> None:
        self.backup = self.editor.text

    def undo(self) -> None:
        if self.backup is not None:
            self.editor.text = self.backup
            self.editor.select(0, 0)

    @abstractmethod
    def execute(self) -> bool:
        """Run the command; True means it changed the editor's state."""


class CopyCommand(Command):
    # Copy doesn't change the editor, so it never reaches the history
    def execute(self) -> bool:
        self.app.clipboard = self.editor.get_selection()
        return False


class CutCommand(Command):
    def execute(self) -> bool:
        self.save_backup()
        self.app.clipboard = self.editor.get_selection()
        self.editor.delete_selection()
        return True


class PasteCommand(Command):
    def execute(self) -> bool:
        self.save_backup()
        self.editor.replace_selection(self.app.clipboard)
        return True


class UndoCommand(Command):
    def execute(self) -> bool:
        self.app.undo()
        return False


class CommandHistory:
    """The global command history is just a stack."""

    def __init__(self) -> None:
        self._history: List[Command] = []

    def push(self, command: Command) -> None:
        self._history.append(command)

    def pop(self) -> Optional[Command]:
        return self._history.pop() if self._history else None

    def __len__(self) -> int:
        return len(self._history)


class Application:
    """
    The sender: sets up object relations and, when something needs to be
    done, creates a command object and executes it.
    """

    def __init__(self) -> None:
        self.clipboard = ""
        self.editors: List[Editor] = []
        self.active_editor: Optional[Editor] = None
        self.history = CommandHistory()

    def open_editor(self, text: str = "") -> Editor:
        editor = Editor(text)
        self.editors.append(editor)
        self.active_editor = editor
        return editor

    def create_ui(self) -> Dict[str, Callable[[], None]]:
        """Keyboard shortcuts bound to command factories."""
        def copy() -> None:
            self.execute_command(CopyCommand(self, self._editor()))

        def cut() -> None:
            self.execute_command(CutCommand(self, self._editor()))

        def paste() -> None:
            self.execute_command(PasteCommand(self, self._editor()))

        def undo() -> None:
            self.execute_command(UndoCommand(self, self._editor()))

        return {"Ctrl+C": copy, "Ctrl+X": cut, "Ctrl+V": paste, "Ctrl+Z": undo}

    def _editor(self) -> Editor:
        if self.active_editor is None:
            raise RuntimeError("No active editor")
        return self.active_editor

    def execute_command(self, command: Command) -> None:
        """Execute a command and record it when it changed the state."""
        if command.execute():
            self.history.push(command)

    def undo(self) -> None:
        """
        Undo the most recent command. The application doesn't know the
        command's class; the command knows how to undo itself.
        """
        command = self.history.pop()
        if command is not None:
            command.undo()


@demo("command", "editor", "Copy, cut, paste and undo in a text editor")
def run_editor() -> None:
    app = Application()
    editor = app.open_editor("Hello, design patterns!")
    shortcuts = app.create_ui()
    print(f"Text: {editor.text!r}")

    editor.select(7, 14)
    shortcuts["Ctrl+C"]()
    print(f"Copied: {app.clipboard!r}")

    editor.select(0, 7)
    shortcuts["Ctrl+X"]()
    print(f"After cut: {editor.text!r} (clipboard {app.clipboard!r})")

    editor.select(len(editor.text), len(editor.text))
    shortcuts["Ctrl+V"]()
    print(f"After paste: {editor.text!r}")

    shortcuts["Ctrl+Z"]()
    print(f"After undo: {editor.text!r}")

    shortcuts["Ctrl+Z"]()
    print(f"After second undo: {editor.text!r}")
    print(f"History size: {len(app.history)}")
