import io

import pytest

from logicsim.circuit import Circuit, main

DEMO_FILE = """WIRES
3
0,input A
1,input B
2,output
GATES
1
AND2,0,1,2
INJECT
4
0,0,0
0,1,1
4,0,1
6,1,0
"""


def _run(circuit):
    buf = io.StringIO()
    circuit.run(buf)
    return buf.getvalue()


def _write(tmp_path, text):
    path = tmp_path / "circuit.txt"
    path.write_text(text)
    return path


def test_demo_trace():
    c = Circuit()
    c.load_demo()
    assert _run(c) == (
        "@0\nW0 is low\n\nW1 is high\n\n"
        "@0\nW2 is low\n\n"
        "@4\nW0 is high\n\n"
        "@4\nW2 is high\n\n"
        "@6\nW1 is low\n\n"
        "@6\nW2 is low\n\n"
    )


def test_advance_false_when_finished():
    c = Circuit()
    c.load_demo()
    _run(c)
    buf = io.StringIO()
    assert c.advance(buf) is False
    assert buf.getvalue() == ""


def test_advance_on_empty_circuit():
    assert Circuit().advance(io.StringIO()) is False


def test_parsed_file_matches_demo(tmp_path):
    parsed = Circuit()
    assert parsed.parse(_write(tmp_path, DEMO_FILE)) is True
    demo = Circuit()
    demo.load_demo()
    assert _run(parsed) == _run(demo)
    assert [w.name for w in parsed.wires] == [w.name for w in demo.wires]


def test_parse_missing_file(tmp_path):
    assert Circuit().parse(tmp_path / "absent.txt") is False


def test_not_gate_parsed(tmp_path):
    text = "WIRES\n2\n0,in\n1,out\nGATES\n1\nNOT,0,1\nINJECT\n1\n0,0,0\n"
    c = Circuit()
    c.parse(_write(tmp_path, text))
    trace = _run(c)
    assert "W1 is high" in trace
    assert c.wires[1].state == "1"


def test_parse_bad_wire_index(tmp_path):
    text = "WIRES\n1\n0,a\nGATES\n1\nNOT,0,9\n"
    with pytest.raises(ValueError):
        Circuit().parse(_write(tmp_path, text))


def test_parse_bad_count(tmp_path):
    with pytest.raises(ValueError):
        Circuit().parse(_write(tmp_path, "WIRES\nmany\n"))


def test_parse_truncated(tmp_path):
    with pytest.raises(ValueError):
        Circuit().parse(_write(tmp_path, "WIRES\n2\n0,a\n"))


def test_start_uml_lists_named_wires_only(tmp_path):
    c = Circuit()
    c.parse(_write(tmp_path, "WIRES\n2\n0,input A\n1,\n"))
    buf = io.StringIO()
    c.start_uml(buf)
    out = buf.getvalue()
    assert out.startswith("@startuml\n")
    assert 'binary "input A" as W0\n' in out
    assert "W1" not in out


def test_end_uml():
    buf = io.StringIO()
    Circuit().end_uml(buf)
    assert buf.getvalue() == "@enduml\n"


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Please provide a circuit file to simulate." in capsys.readouterr().out


def test_main_prints_trace(tmp_path, capsys):
    assert main([str(_write(tmp_path, DEMO_FILE))]) == 0
    out = capsys.readouterr().out
    assert out.startswith("@startuml\n")
    assert out.endswith("@enduml\n\n")
    assert "@6\n" in out