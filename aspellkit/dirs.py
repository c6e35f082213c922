"""Locate the configuration, data, dictionary and locale directories.

The layout assumed for an installation is::

    <prefix>/bin      programs and libraries
    <prefix>/etc      global configuration
    <prefix>/share    language data
    <prefix>/dict     dictionaries
    <prefix>/locale   message catalogues

Each directory is looked for next to the running module first, then
through the registry values, the program-files folder and the common
application-data folder, and finally falls back to a default under the
program-files folder. Results are cached per resolver and returned with
forward slashes, runs of separators collapsed to one.
"""

from __future__ import annotations

import os
import threading
from typing import Callable, Dict, Mapping, MutableMapping, Optional, Sequence, Union

ASPELL_APPNAME = "Aspell-0.60"
DEFAULT_PROGRAM_FILES = "c:/Program Files"

_SEPARATORS = ("/", "\\")

LocaleName = Union[str, Sequence[str], None]


def unixpath(path: str) -> str:
    """Turn every run of ``/`` or ``\\`` in *path* into a single ``/``."""
    parts = []
    previous_sep = False
    for ch in path:
        if ch in _SEPARATORS:
            if not previous_sep:
                parts.append("/")
            previous_sep = True
        else:
            parts.append(ch)
            previous_sep = False
    return "".join(parts)


def install_dir(module_path: Optional[str]) -> Optional[str]:
    """The installation directory of the module at *module_path*.

    The file name is dropped, keeping the trailing separator, and a final
    ``bin`` directory is dropped as well. A path without any separator is
    returned whole; an empty or missing path gives None.
    """
    if not module_path:
        return None
    index = max(module_path.rfind(sep) for sep in _SEPARATORS)
    if index < 0:
        return module_path
    directory = module_path[: index + 1]
    if index >= 6:
        tail = directory[index - 4:]
        if (
            tail[0] in _SEPARATORS
            and tail[4] in _SEPARATORS
            and tail[1:4].lower() == "bin"
        ):
            directory = directory[: index - 3]
    return directory


def _exists(path: str) -> bool:
    return bool(path) and os.path.exists(unixpath(path))


def _make_dir(path: str) -> None:
    try:
        os.mkdir(unixpath(path))
    except OSError:
        pass


class DirectoryResolver:
    """Resolves the installation directories for one environment.

    *module_path* is the file of the running program or library;
    *program_files* and *common_appdata* are the system folders of those
    names; *registry* maps the installation's registry value names
    (``Data``, ``Dictionaries``) to paths, or is None when there is no
    registry key; *environ* is the environment read and updated (the
    process environment by default); *home* is the user's profile folder.
    """

    appname = ASPELL_APPNAME

    def __init__(
        self,
        module_path: Optional[str] = None,
        program_files: Optional[str] = None,
        common_appdata: Optional[str] = None,
        registry: Optional[Mapping[str, str]] = None,
        environ: Optional[MutableMapping[str, str]] = None,
        home: Optional[str] = None,
    ) -> None:
        self.module_path = module_path
        self.program_files = program_files
        self.common_appdata = common_appdata
        self.registry = registry
        self.environ = os.environ if environ is None else environ
        self.home = home
        self._cache: Dict[str, str] = {}
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"DirectoryResolver(module_path={self.module_path!r})"

    def _cached(self, name: str, compute: Callable[[], str]) -> str:
        with self._lock:
            if name not in self._cache:
                self._cache[name] = compute()
            return self._cache[name]

    def _registry_value(self, name: str) -> str:
        value = self.registry.get(name) if self.registry is not None else None
        return str(value) if value else ""

    def _under_app(self, folder: str, subdir: str) -> str:
        return f"{folder}\\{self.appname}\\{subdir}"

    def _resolve(self, subdir: str, regvalue: Optional[str]) -> str:
        self.set_environment()
        current = ""
        done = False

        base = install_dir(self.module_path)
        if base:
            current = f"{base}\\{subdir}"
            done = _exists(current)

        if regvalue and self.registry is not None:
            current = self._registry_value(regvalue)
            if _exists(current):
                done = True

        for folder in (self.program_files, self.common_appdata):
            if done:
                break
            if folder:
                current = self._under_app(folder, subdir)
                done = _exists(current)

        if not done:
            env = self.environ.get("ProgramFiles")
            if self.program_files:
                current = self._under_app(self.program_files, subdir)
            elif env is not None:
                current = f"{env}/{self.appname}/{subdir}"
            else:
                current = f"{DEFAULT_PROGRAM_FILES}/{self.appname}/{subdir}"
            _make_dir(current)

        return unixpath(current)

    def home_dir(self) -> str:
        """The user's home folder, else the working directory, else ``.``."""

        def compute() -> str:
            home = self.home
            if not home:
                try:
                    home = os.getcwd()
                except OSError:
                    home = ""
            return unixpath(home or ".")

        return self._cached("home", compute)

    def conf_dir(self) -> str:
        """Global configuration directory, like ``/etc``."""
        return self._cached("conf", lambda: self._resolve("etc", None))

    def locale_dir(self) -> str:
        """Message catalogue directory, like ``/usr/share/locale``."""
        return self._cached("locale", lambda: self._resolve("locale", None))

    def data_dir(self) -> str:
        """Language data directory, like ``/usr/lib/aspell``."""
        return self._cached("data", lambda: self._resolve("share", "Data"))

    def dict_dir(self) -> str:
        """Dictionary directory; the data directory when none is found."""

        def compute() -> str:
            self.set_environment()
            current = ""
            done = False
            base = install_dir(self.module_path)
            if base:
                current = f"{base}\\dict"
                done = _exists(current)
            if self.registry is not None:
                current = self._registry_value("Dictionaries")
                if _exists(current):
                    done = True
            if not done:
                current = self.data_dir()
            return unixpath(current)

        return self._cached("dict", compute)

    def prefix_dir(self) -> str:
        """Installation prefix, like ``/usr``; always ends with ``/``."""

        def compute() -> str:
            self.set_environment()
            base = install_dir(self.module_path)
            if base:
                return unixpath(base)
            if self.program_files:
                return unixpath(f"{self.program_files}\\{self.appname}\\")
            env = self.environ.get("ProgramFiles")
            if env is not None:
                current = f"{env}/{self.appname}/"
            else:
                current = f"{DEFAULT_PROGRAM_FILES}/{self.appname}/"
            _make_dir(current)
            return unixpath(current)

        return self._cached("prefix", compute)

    def set_environment(self, locale_name: LocaleName = None) -> None:
        """Fill in ``HOME`` and ``LANG`` when the environment lacks them.

        ``HOME`` is set to :meth:`home_dir` when empty. ``LANG`` is set from
        *locale_name* (``"en_US"`` or ``("en", "US")``) only when none of
        ``LC_MESSAGES``, ``LANGUAGE`` and ``LANG`` has a value.
        """
        if not self.environ.get("HOME"):
            home = self.home_dir()
            if home:
                self.environ["HOME"] = home

        if any(self.environ.get(name) for name in ("LC_MESSAGES", "LANGUAGE", "LANG")):
            return
        if not locale_name:
            return
        if isinstance(locale_name, str):
            lang = locale_name
        else:
            language, country = locale_name
            if not (language and country):
                return
            lang = f"{language}_{country}"
        self.environ["LANG"] = lang