"""Import path rewriting for materialised components.

Registry sources import workspace packages of the registry monorepo
(``@repo/...``). After the scaffolding tool has written a component into the
consumer project those specifiers are rewritten to the project's own aliases.

Rules run in a fixed order: the specific rewrites first, the generic
``@repo/`` prefix strip last. Running the generic rule earlier would turn
``@repo/code-block`` into ``code-block`` before its dedicated rule sees it.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape

from devcn_ui.core.config import ImportAliases
from devcn_ui.core.paths import display_path
from devcn_ui.utils.formatting import print_info, print_warning

logger = logging.getLogger(__name__)

# File types the scaffolding tool writes for components.
SOURCE_SUFFIXES = frozenset({".tsx", ".ts", ".jsx", ".js"})

# from '<specifier>' with the quote character captured so it is preserved.
_FROM_CLAUSE = r"""(?P<lead>\bfrom\s+)(?P<q>['"]){body}(?P=q)"""
_REST = r"""(?P<rest>[^'"]+)"""


@dataclass(frozen=True, slots=True)
class ImportRewriteRule:
    """A single specifier rewrite.

    Attributes:
        name: Short rule name for logging.
        pattern: Compiled pattern matching a ``from '<specifier>'`` clause.
        replacement: Target specifier; ``{rest}`` expands to the part of the
            specifier captured after the matched prefix.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str

    def _substitute(self, match: re.Match[str]) -> str:
        rest = match.groupdict().get("rest") or ""
        target = self.replacement.format(rest=rest)
        return f"{match['lead']}{match['q']}{target}{match['q']}"

    def apply(self, text: str) -> str:
        """Apply the rule to every matching clause in text."""
        return self.pattern.sub(self._substitute, text)


def _rule(name: str, body: str, replacement: str) -> ImportRewriteRule:
    return ImportRewriteRule(
        name=name,
        pattern=re.compile(_FROM_CLAUSE.format(body=body)),
        replacement=replacement,
    )


def build_rules(
    aliases: ImportAliases | None = None,
    internal_prefix: str = "@repo/",
) -> tuple[ImportRewriteRule, ...]:
    """Build the ordered rewrite rules.

    Args:
        aliases: Local import aliases. If None, uses the shadcn/ui defaults.
        internal_prefix: Workspace namespace prefix of the registry monorepo.

    Returns:
        Rules in the order they must be applied.
    """
    aliases = aliases or ImportAliases()
    prefix = re.escape(internal_prefix)
    return (
        _rule("ui", f"{prefix}shadcn-ui/components/ui/{_REST}", f"{aliases.ui}/{{rest}}"),
        _rule("utils", f"{prefix}shadcn-ui/lib/utils", aliases.utils),
        _rule("code-block", f"{prefix}code-block", aliases.code_block),
        _rule("internal", f"{prefix}(?!{prefix}){_REST}", "{rest}"),
    )


DEFAULT_RULES = build_rules()


def rewrite_imports(
    content: str,
    rules: tuple[ImportRewriteRule, ...] = DEFAULT_RULES,
) -> str:
    """Rewrite internal import specifiers in source text.

    Idempotent: rewritten specifiers no longer carry the internal prefix, so
    a second pass changes nothing. A doubled prefix (``@repo/@repo/x``) is
    left unchanged by the generic strip.

    Args:
        content: Source text.
        rules: Ordered rewrite rules.

    Returns:
        Transformed source text.
    """
    for rule in rules:
        content = rule.apply(content)
    return content


def rewrite_file(
    path: Path,
    rules: tuple[ImportRewriteRule, ...] = DEFAULT_RULES,
) -> bool:
    """Rewrite a source file in place.

    The file is only written when its content changes, so untouched files
    keep their modification time.

    Args:
        path: File to rewrite.
        rules: Ordered rewrite rules.

    Returns:
        True if the file was changed.

    Raises:
        OSError: If the file cannot be read or written.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    original = path.read_text(encoding="utf-8")
    transformed = rewrite_imports(original, rules)
    if transformed == original:
        return False
    path.write_text(transformed, encoding="utf-8")
    return True


def iter_source_files(directory: Path) -> list[Path]:
    """Return component source files under a directory, recursively, sorted."""
    return sorted(
        p for p in directory.rglob("*") if p.is_file() and p.suffix in SOURCE_SUFFIXES
    )


def rewrite_directory(
    directory: Path,
    rules: tuple[ImportRewriteRule, ...] = DEFAULT_RULES,
    project_dir: Path | None = None,
) -> list[Path]:
    """Rewrite every component source file under a directory.

    A missing directory is not an error. Files that cannot be processed are
    reported and skipped.

    Args:
        directory: The project's components directory.
        rules: Ordered rewrite rules.
        project_dir: Project root, used to display relative paths.

    Returns:
        Paths of the files that were changed.
    """
    if not directory.is_dir():
        logger.debug("Components directory %s not found, nothing to rewrite", directory)
        return []

    changed: list[Path] = []
    for path in iter_source_files(directory):
        shown = display_path(path, project_dir)
        try:
            modified = rewrite_file(path, rules)
        except (OSError, UnicodeDecodeError) as e:
            print_warning(f"Could not transform imports in {escape(shown)}: {e}")
            continue

        if modified:
            logger.info("Transformed imports in %s", shown)
            changed.append(path)
            print_info(f"Transformed imports in {escape(shown)}")

    return changed
