from folder_search import cli

def test_cli_prints_matching_paths(sample_tree, capsys):
    exit_code = cli.main([str(sample_tree), "-p", "*.txt", "-d", "0"])

    out = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert out == [str(sample_tree / "a.txt")]

def test_cli_details_include_size(sample_tree, capsys):
    exit_code = cli.main([str(sample_tree), "-p", "b.log", "-d", "0", "--details"])

    line = capsys.readouterr().out.strip()
    path, size, _modified = line.split("\t")
    assert exit_code == 0
    assert path == str(sample_tree / "b.log")
    assert int(size) == len("content of b.log")

def test_cli_regex_and_hidden_flags(sample_tree, capsys):
    exit_code = cli.main([str(sample_tree), "--regex", "-p", "^buried", "--include-hidden"])

    out = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert out == [str(sample_tree / ".hidden" / "nested" / "buried.txt")]

def test_cli_case_sensitive_flag(sample_tree, capsys):
    cli.main([str(sample_tree), "-p", "*.TXT", "-d", "0", "--case-sensitive"])
    assert capsys.readouterr().out == ""

def test_cli_missing_root_exits_with_error(tmp_path, capsys):
    exit_code = cli.main([str(tmp_path / "missing")])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert "Search root not found" in captured.err

def test_cli_rejects_bad_depth(sample_tree, capsys):
    assert cli.main([str(sample_tree), "-d", "-5"]) == 2
    assert "max_depth" in capsys.readouterr().err

def test_cli_rejects_bad_regex(sample_tree, capsys):
    assert cli.main([str(sample_tree), "--regex", "-p", "("]) == 2
    assert "Invalid pattern" in capsys.readouterr().err
