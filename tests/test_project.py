import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from rustdrill.project import Crate, RustAnalyzerProject


def test_add_path_only_accepts_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/intro1.rs")
    project.add_path("exercises/intro/README.md")
    project.add_path("exercises/intro")
    assert [c.root_module for c in project.crates] == [str(Path("exercises/intro/intro1.rs"))]
    crate = project.crates[0]
    assert crate.edition == "2021"
    assert crate.deps == []
    assert crate.cfg == ["test"]


def test_exercises_to_json_walks_tree(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "one.rs").write_text("fn main() {}")
    (tmp_path / "a" / "notes.md").write_text("x")
    (tmp_path / "two.rs").write_text("fn main() {}")
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    roots = sorted(c.root_module for c in project.crates)
    assert roots == sorted([str(tmp_path / "a" / "one.rs"), str(tmp_path / "two.rs")])


def test_exercises_to_json_empty_dir(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    assert project.crates == []


def test_to_json_round_trip():
    project = RustAnalyzerProject(sysroot_src="/src", crates=[Crate(root_module="x.rs")])
    data = json.loads(project.to_json())
    assert list(data) == ["sysroot_src", "crates"]
    assert data["sysroot_src"] == "/src"
    assert data["crates"] == [
        {"root_module": "x.rs", "edition": "2021", "deps": [], "cfg": ["test"]}
    ]
    assert " " not in project.to_json()


def test_get_sysroot_src_prefers_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/library")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/custom/library"


def test_get_sysroot_src_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, b"/opt/toolchain\n", b"")

    project = RustAnalyzerProject()
    with patch("subprocess.run", fake_run):
        project.get_sysroot_src()
    assert calls == [["rustc", "--print", "sysroot"]]
    expected = Path("/opt/toolchain").joinpath("lib", "rustlib", "src", "rust", "library")
    assert project.sysroot_src == str(expected)
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_write_to_disk(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/s")
    project.add_path("a.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text(encoding="utf-8") == project.to_json()
    assert json.loads(target.read_text())["crates"][0]["root_module"] == "a.rs"