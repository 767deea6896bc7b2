"""
Adapter.

Adapter is a structural design pattern which allows incompatible objects to
collaborate. The adapter wraps one object, catches calls for it and
transforms them into a format and interface the second object recognizes.

Use the Adapter when you want to use an existing class whose interface isn't
compatible with the rest of your code, or to reuse several subclasses that
lack some common functionality that can't be added to the superclass.

Identification: a constructor which takes an instance of a different
abstract type; calls are translated and then directed to the wrapped object.

Complexity: 1/3
Popularity: 3/3
"""
from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="adapter",
    title="Adapter",
    category=PatternCategory.STRUCTURAL,
    intent="Allow objects with incompatible interfaces to collaborate.",
    applicability=[
        "Use an existing class whose interface doesn't match the rest of the code.",
        "Reuse subclasses lacking common functionality that can't go in the superclass.",
    ],
    identification="A constructor taking an instance of a different abstract type.",
    complexity=1,
    popularity=3,
    reference_url="https://refactoring.guru/design-patterns/adapter",
))


class Target:
    """The Target defines the domain-specific interface used by the client code."""

    def request(self) -> str:
        return "Target: The default target's behavior."


class Adaptee:
    """
    The Adaptee contains some useful behavior, but its interface is
    incompatible with the existing client code.
    """

    def specific_request(self) -> str:
        return ".eetpadA eht fo roivaheb laicepS"


class Adapter(Target):
    """The Adapter makes the Adaptee's interface compatible with the Target's."""

    def __init__(self, adaptee: Adaptee):
        self.adaptee = adaptee

    def request(self) -> str:
        return f"Adapter: (TRANSLATED) {self.adaptee.specific_request()[::-1]}"


def client_code(target: Target) -> None:
    """The client code supports all classes that follow the Target interface."""
    print(target.request())


@demo("adapter", "canonical", "Translate the Adaptee's reversed text")
def run_canonical() -> None:
    print("Client: I can work just fine with the Target objects:")
    client_code(Target())

    print("")

    adaptee = Adaptee()
    print("Client: The Adaptee class has a weird interface. See, I don't understand it:")
    print(f"Adaptee: {adaptee.specific_request()}")

    print("")

    print("Client: But I can work with it via the Adapter:")
    client_code(Adapter(adaptee))


# External package working only with XML
class CoreClass:
    def display_xml(self, xml_content: str) -> str:
        return f"CoreClass: I Work only with XML: {xml_content}"


# Our library working with JSON
class AnalyticsLibrary:
    def display_json(self, json_content: str) -> str:
        return f"AnalyticsLibrary: I display only JSON : {json_content}"


class XmlToJsonAdapter(CoreClass):
    def __init__(self, library: AnalyticsLibrary):
        self.library = library

    def display_xml(self, xml_content: str) -> str:
        json_content = xml_content.replace("xml", "json", 1)
        return self.library.display_json(json_content)


def analytics_client_code(core: CoreClass) -> None:
    print(core.display_xml("test xml content"))


@demo("adapter", "analytics", "Feed XML content to a JSON-only library")
def run_analytics() -> None:
    analytics_client_code(CoreClass())
    analytics_client_code(XmlToJsonAdapter(AnalyticsLibrary()))
