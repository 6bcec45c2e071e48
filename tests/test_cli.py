import json

from bs4 import BeautifulSoup

import loadshed_cli


def write_area(tmp_path, data):
    path = tmp_path / "area.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_prints_windows(tmp_path, area_data, capsys):
    assert loadshed_cli.main(["--input", write_area(tmp_path, area_data)]) == 0
    out = capsys.readouterr().out
    assert "Wednesday, May 10 09:15 - 11:00 (Stage 2)\n09:15-11:00" in out


def test_writes_html(tmp_path, area_data):
    html = tmp_path / "display.html"
    code = loadshed_cli.main(["--input", write_area(tmp_path, area_data), "--html", str(html), "--classes", "small"])
    assert code == 0
    wrapper = BeautifulSoup(html.read_text(encoding="utf-8"), "html.parser").find("div")
    assert wrapper["class"] == ["small"]
    assert "20:00-22:30" in wrapper.get_text()


def test_missing_input_fails(tmp_path, capsys):
    assert loadshed_cli.main(["--input", str(tmp_path / "missing.json")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_invalid_dataset_fails(tmp_path, capsys):
    assert loadshed_cli.main(["--input", write_area(tmp_path, {"events": []})]) == 1
    assert "info" in capsys.readouterr().err


def test_label(capsys):
    code = loadshed_cli.main(["--label", "2023-05-10T22:00:00+02:00 - 2023-05-11T00:30:00+02:00 (Stage 4)"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "Wednesday, May 10 22:00 - Thursday, May 11 00:30 (Stage 4)"


def test_bad_label(capsys):
    assert loadshed_cli.main(["--label", "not a label"]) == 1
    assert "Not an event label" in capsys.readouterr().err


def test_bad_slot_only_drops_its_event(tmp_path, area_data, capsys):
    area_data["schedule"]["days"][0]["stages"][3] = [None]
    assert loadshed_cli.main(["--input", write_area(tmp_path, area_data)]) == 0
    out = capsys.readouterr().out
    assert "09:15-11:00" in out
    assert "(Stage 4)" not in out.split("Plumstead (11)")[-1]


def test_null_events_fail_cleanly(tmp_path, area_data, capsys):
    area_data["events"] = None
    assert loadshed_cli.main(["--input", write_area(tmp_path, area_data)]) == 1
    assert "must be JSON lists" in capsys.readouterr().err
