"""Tests for the Composite pattern."""

from gof_patterns.structural.composite import (
    Composite,
    CompositeInstructionSet,
    Instruction,
    Leaf,
    LogInstruction,
    TaskRunner,
    run_canonical,
    run_task_runner,
)


class FailingInstruction(Instruction):
    def __init__(self, name: str):
        self.name = name

    def execute(self) -> bool:
        return False


class TestTree:
    """Leaves and composites share one interface."""

    def test_leaf(self):
        leaf = Leaf()
        assert leaf.operation() == "Leaf"
        assert not leaf.is_composite()

    def test_nested_branches(self):
        tree = Composite()
        branch = Composite()
        branch.add(Leaf())
        branch.add(Leaf())
        tree.add(branch)
        tree.add(Leaf())

        assert tree.operation() == "Branch(Branch(Leaf+Leaf)+Leaf)"
        assert branch.parent is tree

    def test_remove_clears_parent(self):
        tree = Composite()
        leaf = Leaf()
        tree.add(leaf)
        tree.remove(leaf)

        assert leaf.parent is None
        assert tree.operation() == "Branch()"


class TestInstructionSets:
    """Composite instruction sets run their children in order."""

    def test_execute_stops_at_first_failure(self, capsys):
        instruction_set = CompositeInstructionSet("set")
        instruction_set.add_child(LogInstruction("one", "first"))
        instruction_set.add_child(FailingInstruction("broken"))
        instruction_set.add_child(LogInstruction("three", "never"))

        assert instruction_set.execute() is False
        assert capsys.readouterr().out == "one: first\n"

    def test_remove_child_by_name(self):
        instruction_set = CompositeInstructionSet("set")
        first = LogInstruction("a", "x")
        instruction_set.add_child(first)
        instruction_set.add_child(LogInstruction("b", "y"))

        instruction_set.remove_child(LogInstruction("a", "other"))
        assert [child.name for child in instruction_set.children] == ["b"]

    def test_task_runner_results(self, capsys):
        runner = TaskRunner([LogInstruction("ok", "fine"), FailingInstruction("bad")])
        assert runner.run_tasks() == [True, False]


def test_canonical_demo_output(capsys):
    run_canonical()
    out = capsys.readouterr().out

    assert "RESULT: Leaf" in out
    assert "RESULT: Branch(Branch(Leaf+Leaf)+Branch(Leaf))\n" in out
    assert "RESULT: Branch(Branch(Leaf+Leaf)+Branch(Leaf)+Leaf)" in out


def test_task_runner_demo_output(capsys):
    run_task_runner()
    lines = capsys.readouterr().out.splitlines()

    assert lines == [
        "Starting: Task runner booting up...",
        "Composite 1: The first sub task",
        "Composite 1: The second sub task",
        "Composite 2: The first sub task",
        "Composite 2: The second sub task",
    ]
