import json
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from rustdrills.project import Crate, RustAnalyzerProject


@pytest.fixture(autouse=True)
def _workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)


def test_add_path_accepts_rust_sources():
    project = RustAnalyzerProject()
    project.add_path("exercises/if/if1.rs")
    assert project.crates == [Crate(root_module="exercises/if/if1.rs")]
    assert project.crates[0].edition == "2021"
    assert project.crates[0].cfg == ["test"]
    assert project.crates[0].deps == []


@pytest.mark.parametrize(
    "path", ["exercises/clippy/Cargo.toml", "exercises/README", "./exercises/a.rs"]
)
def test_add_path_rejects_others(path):
    project = RustAnalyzerProject()
    project.add_path(path)
    assert project.crates == []


def test_exercises_to_json_collects_rs_files():
    for name in ["exercises/if/if2.rs", "exercises/if/if1.rs",
                 "exercises/clippy/Cargo.toml", "exercises/README"]:
        Path(name).parent.mkdir(parents=True, exist_ok=True)
        Path(name).write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(".")
    assert [c.root_module for c in project.crates] == [
        str(Path("exercises/if/if1.rs")),
        str(Path("exercises/if/if2.rs")),
    ]


def test_exercises_to_json_without_directory():
    project = RustAnalyzerProject()
    project.exercises_to_json(".")
    assert project.crates == []


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/opt/rust/library")
    project = RustAnalyzerProject()
    with mock.patch("rustdrills.project.subprocess.run") as run:
        project.get_sysroot_src()
    assert project.sysroot_src == "/opt/rust/library"
    assert run.call_count == 0


def test_sysroot_from_rustc(capsys):
    toolchain = "/home/learner/.rustup/toolchains/stable"
    completed = subprocess.CompletedProcess([], 0, (toolchain + "\n").encode(), b"")
    project = RustAnalyzerProject()
    with mock.patch("rustdrills.project.subprocess.run", return_value=completed) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert project.sysroot_src == str(
        Path(toolchain, "lib", "rustlib", "src", "rust", "library")
    )
    assert f"Determined toolchain: {toolchain}\n" in capsys.readouterr().out


def test_to_json_round_trip():
    project = RustAnalyzerProject(sysroot_src="/opt/rust/library")
    project.add_path("exercises/if/if1.rs")
    assert json.loads(project.to_json()) == {
        "sysroot_src": "/opt/rust/library",
        "crates": [
            {"root_module": "exercises/if/if1.rs", "edition": "2021",
             "deps": [], "cfg": ["test"]}
        ],
    }
    assert " " not in project.to_json()


def test_write_to_disk():
    project = RustAnalyzerProject(sysroot_src="/opt/rust/library")
    project.add_path("exercises/if/if2.rs")
    project.write_to_disk("rust-project.json")
    assert Path("rust-project.json").read_text() == project.to_json()