"""
heuristics.py – Name-based pruning rules for the directory walk.

Two questions are answered here, both from a bare file or directory name:

  * Is this file worth probing?       looks_like_java_binary()
  * Is this directory worth entering? is_heuristic_directory()

Directory names are lowercased before matching; launcher filenames are
compared as-is, so "JAVA.EXE" is not a candidate on Windows.

Both checks are substring/suffix tests, not exact names: "runjava" matches
the "java" suffix and gets probed like any other candidate.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Optional

from javascan import platforms

# ── Keyword tables ────────────────────────────────────────────────────────────

# Fragments of directory names that tend to lead to a JVM: vendor names,
# IDEs that bundle a JBR, Minecraft launchers/clients, generic install
# locations and their Chinese equivalents.
INCLUDED_KEYWORDS = (
    "intellij", "cache", "官启", "vape", "组件", "我的", "liteloader", "运行",
    "pcl", "bin", "appcode", "untitled folder", "content", "microsoft",
    "program", "lunar", "goland", "download", "corretto", "dragonwell",
    "客户", "client", "新建文件夹", "badlion", "usr", "temp", "ext", "run",
    "server", "软件", "software", "arctime", "jdk", "phpstorm", "eclipse",
    "rider", "x64", "jbr", "环境", "jre", "env", "jvm", "启动", "未命名文件夹",
    "sigma", "mojang", "daemon", "craft", "oracle", "vanilla", "lib", "file",
    "msl", "x86", "bakaxl", "高清", "local", "mod", "原版", "webstorm", "应用",
    "hotspot", "fabric", "整合", "net", "mine", "服务", "opt", "home", "idea",
    "clion", "path", "android", "green", "zulu", "官方", "forge", "游戏", "blc",
    "user", "国服", "pycharm", "3dmark", "data", "roaming", "程序", "java",
    "前置", "soar", "1.", "mc", "世界", "jetbrains", "cheatbreaker", "game",
    "网易", "launch", "fsm", "root",
)

# Any of these vetoes a directory regardless of inclusion hits: template
# placeholders, dunder/cache dirs and office suites.
EXCLUDED_KEYWORDS = ("$", "{", "}", "__", "office")

WINDOWS_JAVA_SUFFIX = "java.exe"
POSIX_JAVA_SUFFIX = "java"


@dataclass(frozen=True)
class HeuristicKeywords:
    """Immutable inclusion/exclusion substring sets (already lowercased)."""

    included: FrozenSet[str]
    excluded: FrozenSet[str]

    @classmethod
    def from_iterables(
        cls, included: Iterable[str], excluded: Iterable[str] = EXCLUDED_KEYWORDS
    ) -> "HeuristicKeywords":
        return cls(
            included=frozenset(k.lower() for k in included if k),
            excluded=frozenset(k.lower() for k in excluded if k),
        )


def default_keywords(user: Optional[str] = None) -> HeuristicKeywords:
    """
    The stock keyword sets plus the login name of the current user, so that
    home directories such as C:\\Users\\<name> are entered.
    """
    user = user if user is not None else platforms.login_name()
    included = list(INCLUDED_KEYWORDS)
    if user:
        included.append(user)
    return HeuristicKeywords.from_iterables(included, EXCLUDED_KEYWORDS)


# ── Predicates ────────────────────────────────────────────────────────────────

def is_heuristic_directory(name: str, keywords: HeuristicKeywords) -> bool:
    lowered = name.lower()
    if any(bad in lowered for bad in keywords.excluded):
        return False
    return any(good in lowered for good in keywords.included)


def looks_like_java_binary(filename: str, system_name: Optional[str] = None) -> bool:
    if platforms.is_windows(system_name):
        return filename.endswith(WINDOWS_JAVA_SUFFIX)
    return filename.endswith(POSIX_JAVA_SUFFIX)


def binary_matcher(system_name: Optional[str] = None) -> Callable[[str], bool]:
    """Bind looks_like_java_binary() to one platform, resolved once."""
    resolved = system_name or platforms.system()
    return lambda filename: looks_like_java_binary(filename, resolved)
