"""Generation of rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One standalone exercise file as seen by rust-analyzer."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict:
        return {
            "root_module": self.root_module,
            "edition": self.edition,
            "deps": list(self.deps),
            "cfg": list(self.cfg),
        }


@dataclass
class RustAnalyzerProject:
    """Contents of a rust-project.json file."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_json(self) -> str:
        data = {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        Path(path).write_text(self.to_json(), encoding="utf-8")

    def exercises_to_json(self, root: str | os.PathLike = "./exercises") -> None:
        """Add a crate for every .rs file below root."""
        for path in sorted(Path(root).glob("**/*")):
            if path.suffix == ".rs":
                self.crates.append(Crate(root_module=str(path)))

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or rustc."""
        from_env = os.environ.get("RUST_SRC_PATH")
        if from_env is not None:
            self.sysroot_src = from_env
            return
        result = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        text = (result.stdout or b"").decode("utf-8", errors="replace")
        words = text.split()
        toolchain = words[0] if words else text
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(Path(toolchain, "lib", "rustlib", "src", "rust", "library"))