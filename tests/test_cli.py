from folderbench.cli import main


def test_run_against_directory(tmp_path, capsys):
    report = tmp_path / "report.txt"
    root = tmp_path / "share"
    root.mkdir()
    rc = main([str(root), "--filecount", "50", "--filesize", "1K", "--writesize", "512",
               "--iterations", "2", "--seed", "1", "--report", str(report)])
    assert rc == 0
    lines = report.read_text().splitlines()
    assert len(lines) == 2
    assert all(line.startswith("Created 50 files (size 1Kb) in ") for line in lines)
    for i in range(2):
        files = list((root / f"PerfFilesPerFolder_{i}").iterdir())
        assert len(files) == 50
        assert all(f.stat().st_size == 1024 for f in files)


def test_cleanup_removes_everything(tmp_path, capsys):
    rc = main([str(tmp_path), "--filecount", "50", "--filesize", "200",
               "--writesize", "128", "--cleanup", "--name", "bench"])
    assert rc == 0
    assert list(tmp_path.iterdir()) == []
    assert "Created 50 files (size 200) in " in capsys.readouterr().out


def test_invalid_filecount_does_no_io(tmp_path, capsys):
    rc = main([str(tmp_path), "--filecount", "49"])
    assert rc == 1
    assert list(tmp_path.iterdir()) == []


def test_malformed_size_fails(tmp_path):
    assert main([str(tmp_path), "--filesize", "4Q"]) == 1
    assert list(tmp_path.iterdir()) == []


def test_missing_root_fails(tmp_path):
    assert main([str(tmp_path / "missing"), "--filecount", "50"]) == 1
