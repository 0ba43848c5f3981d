import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from kata.project import Crate, RustAnalyzerProject


def test_add_path_accepts_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/intro1.rs")
    assert project.crates == [Crate(root_module="exercises/intro/intro1.rs")]
    assert project.crates[0].edition == "2021"
    assert project.crates[0].cfg == ["test"]
    assert project.crates[0].deps == []


def test_add_path_ignores_other_files():
    project = RustAnalyzerProject()
    for path in ["exercises/README.md", "exercises/intro", "exercises/a.rs.bak"]:
        project.add_path(path)
    assert project.crates == []


def test_exercises_to_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "intro").mkdir(parents=True)
    (tmp_path / "exercises" / "intro" / "intro1.rs").write_text("fn main() {}")
    (tmp_path / "exercises" / "intro" / "README.md").write_text("readme")
    (tmp_path / "exercises" / "quiz1.rs").write_text("fn main() {}")
    project = RustAnalyzerProject()
    project.exercises_to_json("exercises")
    roots = sorted(crate.root_module for crate in project.crates)
    assert roots == sorted(
        [str(Path("exercises/intro/intro1.rs")), str(Path("exercises/quiz1.rs"))]
    )


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/toolchain/library")
    project.add_path("exercises/quiz2.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert json.loads(target.read_text(encoding="utf-8")) == project.to_dict()


def test_to_dict_keys():
    project = RustAnalyzerProject()
    project.add_path("exercises/quiz3.rs")
    data = project.to_dict()
    assert set(data) == {"sysroot_src", "crates"}
    assert set(data["crates"][0]) == {"root_module", "edition", "deps", "cfg"}


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/src/rust")
    project = RustAnalyzerProject()
    assert project.get_sysroot_src() == "/src/rust"
    assert project.sysroot_src == "/src/rust"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    completed = subprocess.CompletedProcess(
        args=[], returncode=0, stdout=b"/opt/toolchain\n", stderr=b""
    )
    project = RustAnalyzerProject()
    with patch("kata.project.subprocess.run", return_value=completed) as run_mock:
        project.get_sysroot_src()
    assert run_mock.call_args.args[0] == ["rustc", "--print", "sysroot"]
    sysroot = Path(project.sysroot_src)
    assert sysroot.parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert sysroot.parents[4] == Path("/opt/toolchain")
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out