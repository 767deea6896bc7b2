"""Tests for the Adapter pattern."""

from gof_patterns.structural.adapter import (
    Adaptee,
    Adapter,
    AnalyticsLibrary,
    CoreClass,
    Target,
    XmlToJsonAdapter,
    run_analytics,
    run_canonical,
)


def test_target_default_behavior():
    assert Target().request() == "Target: The default target's behavior."


def test_adapter_translates_adaptee():
    assert Adapter(Adaptee()).request() == "Adapter: (TRANSLATED) Special behavior of the Adaptee."


def test_xml_to_json_adapter():
    adapter = XmlToJsonAdapter(AnalyticsLibrary())
    assert isinstance(adapter, CoreClass)
    assert adapter.display_xml("xml in xml") == "AnalyticsLibrary: I display only JSON : json in xml"


def test_canonical_demo_output(capsys):
    run_canonical()
    lines = capsys.readouterr().out.splitlines()

    assert lines[1] == "Target: The default target's behavior."
    assert lines[4] == "Adaptee: .eetpadA eht fo roivaheb laicepS"
    assert lines[-1] == "Adapter: (TRANSLATED) Special behavior of the Adaptee."


def test_analytics_demo_output(capsys):
    run_analytics()
    lines = capsys.readouterr().out.splitlines()

    assert lines == [
        "CoreClass: I Work only with XML: test xml content",
        "AnalyticsLibrary: I display only JSON : test json content",
    ]
