import pytest

from codebundle.cli import EXIT_FAILED, EXIT_OK, EXIT_USAGE, main


@pytest.fixture
def project(tmp_path, monkeypatch):
    (tmp_path / "m.py").write_text("m = 1\n\n")
    (tmp_path / "n.java").write_text("class N {}\n")
    (tmp_path / "z.py").write_text("z = 2\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_bundle_command(project, capsys):
    code = main(["bundle", "--language", "python", "--output", "out.txt",
                 "--sort", "name"])
    assert code == EXIT_OK
    assert (project / "out.txt").read_text() == "m = 1\n\nz = 2\n"
    assert "[info] Bundled 2 files into out.txt" in capsys.readouterr().out


def test_bundle_all_options(project):
    code = main(["bundle", "--language", "python,java", "--output", "out.txt",
                 "--note", "--sort", "type", "--remove-empty-lines",
                 "--author", "Dana", "-q"])
    assert code == EXIT_OK
    assert (project / "out.txt").read_text().splitlines() == [
        "# Author: Dana",
        "# Source: n.java",
        "class N {}",
        "# Source: m.py",
        "m = 1",
        "# Source: z.py",
        "z = 2",
    ]


def test_repeated_language_options(project):
    code = main(["bundle", "--language", "python", "--language", "java",
                 "--output", "out.txt", "-q"])
    assert code == EXIT_OK
    assert "class N {}" in (project / "out.txt").read_text()


def test_explicit_false_flags(project):
    code = main(["bundle", "--language", "python", "--output", "out.txt",
                 "--note", "false", "--remove-empty-lines", "False", "-q"])
    assert code == EXIT_OK
    assert "# Source" not in (project / "out.txt").read_text()


def test_root_option(project, tmp_path):
    sub = project / "pkg"
    sub.mkdir()
    (sub / "only.py").write_text("only\n")
    code = main(["bundle", "--language", "python", "--output", "out.txt",
                 "--root", "pkg", "--note", "-q"])
    assert code == EXIT_OK
    assert (project / "out.txt").read_text() == "# Source: only.py\nonly\n"


def test_unsupported_language(project, capsys):
    code = main(["bundle", "--language", "cobol", "--output", "out.txt"])
    assert code == EXIT_FAILED
    assert "[error] Unsupported language: 'cobol'" in capsys.readouterr().out
    assert not (project / "out.txt").exists()


def test_output_in_reserved_dir(project, capsys):
    (project / "bin").mkdir()
    code = main(["bundle", "--language", "python", "--output", "bin/out.txt"])
    assert code == EXIT_FAILED
    assert "[error] Invalid output path" in capsys.readouterr().out
    assert not (project / "bin" / "out.txt").exists()


def test_empty_output_is_usage_error(project, capsys):
    code = main(["bundle", "--language", "python", "--output", ""])
    assert code == EXIT_USAGE
    assert "[error]" in capsys.readouterr().out


def test_missing_output_is_usage_error(project):
    with pytest.raises(SystemExit) as exc:
        main(["bundle", "--language", "python"])
    assert exc.value.code == EXIT_USAGE


def test_unknown_sort_is_usage_error(project):
    code = main(["bundle", "--language", "python", "--output", "out.txt",
                 "--sort", "size"])
    assert code == EXIT_USAGE


def test_missing_root_fails(project, capsys):
    code = main(["bundle", "--language", "python", "--output", "out.txt",
                 "--root", "nope"])
    assert code == EXIT_FAILED
    assert "[error] Cannot read directory" in capsys.readouterr().out


def test_create_rsp(project, capsys):
    code = main(["create-rsp", "--language", "python,java", "--output", "out.txt",
                 "--note", "--sort", "type", "--author", "Dana"])
    assert code == EXIT_OK
    assert (project / "out.rsp").read_text() == (
        "bundle --language python,java --output out.txt --note True "
        "--sort type --remove-empty-lines False --author Dana\n"
    )
    assert "[info] Created response file: out.rsp" in capsys.readouterr().out
    assert not (project / "out.txt").exists()


def test_create_rsp_does_not_validate(project):
    code = main(["create-rsp", "--language", "cobol", "--output", "bin/out.txt", "-q"])
    assert code == EXIT_FAILED
    code = main(["create-rsp", "--language", "cobol", "--output", "x.txt", "-q"])
    assert code == EXIT_OK
    assert "--language cobol" in (project / "x.rsp").read_text()


def test_replay_response_file(project):
    assert main(["create-rsp", "--language", "python", "--output", "out.txt",
                 "--note", "--remove-empty-lines", "-q"]) == EXIT_OK

    assert main(["@out.rsp"]) == EXIT_OK
    assert (project / "out.txt").read_text() == (
        "# Source: m.py\nm = 1\n# Source: z.py\nz = 2\n"
    )


def test_replay_with_author(project):
    assert main(["create-rsp", "--language", "all", "--output", "out.txt",
                 "--author", "Dana Lee", "-q"]) == EXIT_OK

    assert main(["@out.rsp"]) == EXIT_OK
    lines = (project / "out.txt").read_text().splitlines()
    assert lines[0] == "# Author: Dana Lee"
    assert lines[1:] == ["m = 1", "", "class N {}", "z = 2"]


def test_create_rsp_output_without_file_name(project, capsys):
    code = main(["create-rsp", "--language", "python", "--output", ".", "-q"])
    assert code == EXIT_FAILED
    assert "[error] Invalid output path: ." in capsys.readouterr().out
