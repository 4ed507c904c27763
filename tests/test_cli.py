import pytest

from pair_commit import cli
from pair_commit.persistence import load


def _run(data_file, *args):
    return cli.main(["--data-file", str(data_file), *args])


def test_cli_add_list_and_message(tmp_path, capsys):
    data_file = tmp_path / "home" / "data.yml"

    assert _run(data_file, "add", "-n", "Alice", "-e", "alice@example.com") == 0
    assert _run(data_file, "add", "--name", "Bob", "--email", "bob@example.com", "--active") == 0
    capsys.readouterr()

    assert _run(data_file, "list") == 0
    assert capsys.readouterr().out == (
        "- name: Alice\n"
        "  email: alice@example.com\n"
        "  active: false\n"
        "- name: Bob\n"
        "  email: bob@example.com\n"
        "  active: true\n"
    )

    assert _run(data_file, "message") == 0
    assert capsys.readouterr().out == "Co-authored-by: Bob <bob@example.com>\n"


def test_cli_configure_reads_indexes(tmp_path, capsys, monkeypatch):
    data_file = tmp_path / "data.yml"
    _run(data_file, "add", "-n", "Alice", "-e", "alice@example.com", "-a")
    _run(data_file, "add", "-n", "Bob", "-e", "bob@example.com")
    capsys.readouterr()

    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return "1 5"

    monkeypatch.setattr("builtins.input", fake_input)

    assert _run(data_file, "configure") == 0
    out = capsys.readouterr().out
    assert "- index: 0\n  name: Alice" in out
    assert "- index: 1\n  name: Bob" in out
    assert prompts == ["Enter the indexes of the authors to be active: "]

    assert [author.is_active() for author in load(data_file)] == [False, True]


def test_cli_uses_pair_commit_home(tmp_path, monkeypatch):
    monkeypatch.setenv("PAIR_COMMIT_HOME", str(tmp_path / "app"))

    assert cli.main(["add", "-n", "Alice", "-e", "alice@example.com"]) == 0
    assert (tmp_path / "app" / "data.yml").exists()


def test_cli_reports_malformed_data(tmp_path, capsys):
    data_file = tmp_path / "data.yml"
    data_file.write_text("{not: a list}\n")

    assert _run(data_file, "message") == 1
    err = capsys.readouterr().err
    assert err.startswith("pair-commit: error: ")
    assert "expected a list of authors" in err


def test_cli_reports_undecodable_data(tmp_path, capsys):
    data_file = tmp_path / "data.yml"
    data_file.write_bytes(b"\xff\xfe")

    assert _run(data_file, "message") == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_cli_reports_write_failure(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    assert _run(blocker / "data.yml", "add", "-n", "A", "-e", "a@x.com") == 1
    assert "failed to create directory" in capsys.readouterr().err


def test_cli_keyboard_interrupt_exits_130(tmp_path, monkeypatch):
    def interrupted(prompt):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)
    assert _run(tmp_path / "data.yml", "configure") == 130


def test_cli_requires_a_command():
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_cli_add_requires_email():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["add", "-n", "Alice"])
    assert excinfo.value.code == 2
