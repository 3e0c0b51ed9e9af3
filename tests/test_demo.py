import importlib.util
from pathlib import Path

DEMO_PATH = Path(__file__).resolve().parent.parent / "examples" / "demo.py"


def _load_demo():
    spec = importlib.util.spec_from_file_location("property_store_demo", DEMO_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_demo_runs_against_fixture(capsys, data_dir):
    demo = _load_demo()

    assert demo.run(data_dir, "valid_test_properties.xml") == 0

    out = capsys.readouterr().out
    assert "myString was loaded as: Hello, World" in out
    assert "The first option loaded is January" in out
    assert "myString is now: None" in out
    assert "Number of option lists left: 0" in out


def test_demo_reports_failed_load(capsys, data_dir):
    demo = _load_demo()

    assert demo.run(data_dir, "invalid_test_properties_1.xml") == 1
    assert "AN ERROR OCCURRED!!!" in capsys.readouterr().out
