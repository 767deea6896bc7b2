"""
Composite.

Composite is a structural design pattern that lets you compose objects into
tree structures and then work with these structures as if they were
individual objects.

Use the Composite when you have to implement a tree-like object structure,
or when client code should treat simple and complex elements uniformly.

Identification: an object tree where every node belongs to the same class
hierarchy and methods delegate work to child nodes through the base
interface.

Complexity: 2/3
Popularity: 2/3
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="composite",
    title="Composite",
    category=PatternCategory.STRUCTURAL,
    intent="Compose objects into trees and treat them like individual objects.",
    applicability=[
        "Implement a tree-like object structure.",
        "Treat simple and complex elements uniformly.",
    ],
    identification="Tree nodes of one hierarchy delegating work to their children.",
    complexity=2,
    popularity=2,
    reference_url="https://refactoring.guru/design-patterns/composite",
))


class Component(ABC):
    """Common operations for both simple and complex objects of a tree."""

    def __init__(self) -> None:
        self.parent: Optional["Component"] = None

    def add(self, component: "Component") -> None:
        pass

    def remove(self, component: "Component") -> None:
        pass

    def is_composite(self) -> bool:
        return False

    @abstractmethod
    def operation(self) -> str:
        pass


class Leaf(Component):
    """End object of a composition; does the actual work."""

    def operation(self) -> str:
        return "Leaf"


class Composite(Component):
    """
    A complex component with children. It delegates the actual work to its
    children and then sums up the result.
    """

    def __init__(self) -> None:
        super().__init__()
        self._children: List[Component] = []

    def add(self, component: Component) -> None:
        self._children.append(component)
        component.parent = self

    def remove(self, component: Component) -> None:
        self._children.remove(component)
        component.parent = None

    def is_composite(self) -> bool:
        return True

    def operation(self) -> str:
        results = [child.operation() for child in self._children]
        return f"Branch({'+'.join(results)})"


def client_code(component: Component) -> None:
    print(f"RESULT: {component.operation()}", end="")


def client_code2(component1: Component, component2: Component) -> None:
    """Thanks to the shared interface, no concrete class checks are needed."""
    if component1.is_composite():
        component1.add(component2)
    print(f"RESULT: {component1.operation()}", end="")


@demo("composite", "canonical", "Leaves and branches behind one interface")
def run_canonical() -> None:
    simple = Leaf()
    print("Client: I've got a simple component:")
    client_code(simple)
    print("\n")

    tree = Composite()

    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())

    branch2 = Composite()
    branch2.add(Leaf())

    tree.add(branch1)
    tree.add(branch2)

    print("Client: Now I've got a composite tree:")
    client_code(tree)
    print("\n")

    print("Client: I don't need to check the components classes even when managing the tree:")
    client_code2(tree, simple)
    print("")


class Instruction(ABC):
    name: str

    @abstractmethod
    def execute(self) -> bool:
        pass


class SingleInstruction(Instruction):
    def __init__(self, name: str):
        self.name = name


class LogInstruction(SingleInstruction):
    def __init__(self, name: str, log: str):
        super().__init__(name)
        self.log = log

    def execute(self) -> bool:
        print(f"{self.name}: {self.log}")
        return True


class CompositeInstructionSet(Instruction):
    """
    Instruction made of child instructions, which may themselves be
    composites. Fails as soon as one child fails.
    """

    def __init__(self, name: str):
        self.name = name
        self._children: List[Instruction] = []

    @property
    def children(self) -> List[Instruction]:
        return list(self._children)

    def add_child(self, child: Instruction) -> None:
        self._children.append(child)

    def remove_child(self, child: Instruction) -> None:
        self._children = [c for c in self._children if c.name != child.name]

    def execute(self) -> bool:
        for child in self._children:
            if not child.execute():
                return False
        return True


class TaskRunner:
    def __init__(self, tasks: List[Instruction]):
        self.tasks = tasks

    def run_tasks(self) -> List[bool]:
        return [task.execute() for task in self.tasks]


@demo("composite", "task-runner", "Nested instruction sets run by a task runner")
def run_task_runner() -> None:
    start_up = LogInstruction("Starting", "Task runner booting up...")

    composite = CompositeInstructionSet("Composite")
    composite.add_child(LogInstruction("Composite 1", "The first sub task"))
    composite.add_child(LogInstruction("Composite 1", "The second sub task"))

    composite2 = CompositeInstructionSet("Composite2")
    composite2.add_child(LogInstruction("Composite 2", "The first sub task"))
    composite2.add_child(LogInstruction("Composite 2", "The second sub task"))

    composite.add_child(composite2)

    TaskRunner([start_up, composite]).run_tasks()
