import json

from chartviewer.cli import list_data_files, main


def write_json(path):
    path.write_text(
        json.dumps(
            [
                {"Datetime": "2024-03-05T08:15:00", "Value": 4},
                {"Datetime": "2024-03-06T09:30:00", "Value": 7},
            ]
        ),
        encoding="utf-8",
    )


def test_list_data_files_filters_and_sorts(tmp_path):
    for name in ("b.json", "a.sqlite", "c.DB", "d.txt", "e"):
        (tmp_path / name).write_text("x")
    (tmp_path / "sub.json").mkdir()
    names = [p.name for p in list_data_files(tmp_path)]
    assert names == ["a.sqlite", "b.json", "c.DB"]


def test_list_data_files_empty_directory(tmp_path):
    assert list_data_files(tmp_path) == []


def test_main_lists_directory(tmp_path, capsys):
    (tmp_path / "one.json").write_text("[]")
    (tmp_path / "skip.csv").write_text("")
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"Выбранный путь: {tmp_path}"
    assert out[1:] == ["one.json"]


def test_main_saves_pdf(tmp_path, capsys):
    data = tmp_path / "data.json"
    write_json(data)
    out = tmp_path / "chart.pdf"
    assert main([str(data), "--type", "scatter", "--monochrome", "--pdf", str(out)]) == 0
    assert out.read_bytes().startswith(b"%PDF")
    assert f"Chart saved to {out}" in capsys.readouterr().out


def test_main_pie_chart_pdf(tmp_path):
    data = tmp_path / "data.json"
    write_json(data)
    out = tmp_path / "pie.pdf"
    assert main([str(data), "-t", "Круговая диаграмма", "-o", str(out)]) == 0
    assert out.exists()


def test_main_reports_bad_file(tmp_path, capsys):
    data = tmp_path / "data.json"
    data.write_text("{}")
    out = tmp_path / "chart.pdf"
    assert main([str(data), "--pdf", str(out)]) == 1
    err = capsys.readouterr().err
    assert "Ошибка формата: корневой элемент не является массивом." in err
    assert not out.exists()


def test_main_reports_unsupported_type(tmp_path, capsys):
    data = tmp_path / "values.csv"
    data.write_text("1,2")
    assert main([str(data), "--pdf", str(tmp_path / "x.pdf")]) == 1
    assert "Неподдерживаемый тип файла: .csv" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.json"
    assert main([str(missing), "--pdf", str(tmp_path / "x.pdf")]) == 1
    assert "Не удалось открыть файл" in capsys.readouterr().err