"""Output path resolution for generated sources.

The :class:`OutputPaths` value object turns two user inputs into resolved
paths:

Inputs
======
* ``src``: output directory (``None`` -> ``src`` under the current directory)
* ``ast_filename``: file name of the AST module (``None`` -> ``<module>.rs``)

Outputs
=======
* ``src_dir``: absolute output directory
* ``ast_path``: absolute path of the generated AST module

Rules
=====
* Every generated file lands directly under ``src_dir``; :meth:`resolve`
  rejects absolute names and names that climb out with ``..``.
* No filesystem changes are performed; a missing ``src_dir`` surfaces as a
  reported write failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath

SRC_DIRNAME = "src"
SOURCE_SUFFIX = ".rs"


@dataclass
class OutputPaths:
    """Resolve the directory and file paths generated sources are written to.

    Parameters
    ----------
    src : Path | str | None
        Output directory. ``None`` or blank -> ``./src``.
    module : str
        Grammar module name, used for the default AST file name.
    ast_filename : str | None
        Explicit AST file name overriding ``<module>.rs``.

    Attributes
    ----------
    src_dir : Path
        Absolute output directory.
    ast_path : Path
        Absolute path of the generated AST module.
    """

    src: Path | str | None = None
    module: str = "ast"
    ast_filename: str | None = None

    src_dir: Path = field(init=False)
    ast_path: Path = field(init=False)

    def __post_init__(self) -> None:
        self.src_dir = self._resolve_src(self.src)
        if not self.ast_filename:
            self.ast_filename = f"{self.module}{SOURCE_SUFFIX}"
        self.ast_path = self.resolve(self.ast_filename)

    def resolve(self, file_name: str) -> Path:
        """Return ``src_dir / file_name`` after checking it stays inside.

        Raises:
            ValueError: If ``file_name`` is empty, absolute, or escapes
                ``src_dir``.
        """
        name = file_name.strip()
        if not name:
            raise ValueError("Output file name must not be empty")
        if PurePath(name).is_absolute():
            raise ValueError(f"Output file name '{name}' must be relative")
        target = (self.src_dir / name).resolve()
        if not target.is_relative_to(self.src_dir) or target == self.src_dir:
            raise ValueError(
                f"Output file name '{name}' resolves outside '{self.src_dir}'"
            )
        return target

    @staticmethod
    def _resolve_src(value: Path | str | None) -> Path:
        if value is None:
            return (Path.cwd() / SRC_DIRNAME).resolve()
        if isinstance(value, Path):
            return value.expanduser().resolve()
        s = value.strip()
        if s == "":
            return (Path.cwd() / SRC_DIRNAME).resolve()
        return Path(s).expanduser().resolve()


__all__ = ["OutputPaths", "SOURCE_SUFFIX", "SRC_DIRNAME"]
