"""Unit tests for dependency extraction.

Tests for import detection, package identifiers and workspace filtering.
"""

import pytest
from devcn_ui.core.extractor import (
    extract_dependencies,
    iter_import_paths,
    package_identifier,
    resolve_dependency,
)
from devcn_ui.core.workspace import WorkspaceMap, load_workspace_map
from devcn_ui.models.component import ComponentDescriptor


@pytest.fixture
def workspace() -> WorkspaceMap:
    """Bundled workspace conventions."""
    return load_workspace_map()


class TestIterImportPaths:
    """Tests for iter_import_paths function."""

    @pytest.mark.parametrize(
        ("statement", "expected"),
        [
            ("import { a, b } from 'pkg-named';", "pkg-named"),
            ("import * as ns from 'pkg-namespace';", "pkg-namespace"),
            ('import Default from "pkg-default";', "pkg-default"),
            ("import Default, { a } from 'pkg-mixed';", "pkg-mixed"),
            ("import type { Props } from 'pkg-types';", "pkg-types"),
        ],
    )
    def test_matches_import_forms(self, statement: str, expected: str) -> None:
        """Every import clause form yields its module specifier."""
        assert list(iter_import_paths(statement)) == [expected]

    def test_multiline_named_import(self) -> None:
        """Named imports spanning several lines are matched."""
        content = "import {\n  motion,\n  AnimatePresence,\n} from 'framer-motion';\n"
        assert list(iter_import_paths(content)) == ["framer-motion"]

    def test_side_effect_import_not_matched(self) -> None:
        """Side-effect-only imports are ignored."""
        assert list(iter_import_paths("import 'katex/dist/katex.min.css';")) == []

    def test_source_order(self) -> None:
        """Specifiers are yielded in source order."""
        content = "import a from 'first';\nimport { b } from 'second';\n"
        assert list(iter_import_paths(content)) == ["first", "second"]


class TestPackageIdentifier:
    """Tests for package_identifier function."""

    @pytest.mark.parametrize(
        ("import_path", "expected"),
        [
            ("@scope/pkg/sub", "@scope/pkg"),
            ("@scope/pkg", "@scope/pkg"),
            ("lodash/fp", "lodash"),
            ("clsx", "clsx"),
        ],
    )
    def test_identifier(self, import_path: str, expected: str) -> None:
        """Scoped paths keep two segments, unscoped paths one."""
        assert package_identifier(import_path) == expected


class TestResolveDependency:
    """Tests for resolve_dependency function."""

    @pytest.mark.parametrize(
        "import_path",
        ["./utils", "../lib/cn", "node:fs", "@/lib/utils", "react", "react-dom/client", "next/link"],
    )
    def test_excluded_imports(self, workspace: WorkspaceMap, import_path: str) -> None:
        """Relative, built-in, aliased and framework imports need no package."""
        assert resolve_dependency(import_path, workspace) is None

    def test_shadcn_internal_needs_no_package(self, workspace: WorkspaceMap) -> None:
        """The internal shadcn/ui package maps to no dependency."""
        result = resolve_dependency("@repo/shadcn-ui/components/ui/button", workspace)
        assert result is None

    def test_code_block_maps_to_shiki(self, workspace: WorkspaceMap) -> None:
        """The internal code-block package needs shiki."""
        assert resolve_dependency("@repo/code-block", workspace) == "shiki"

    def test_unmapped_internal_is_discarded(self, workspace: WorkspaceMap) -> None:
        """Internal packages without a mapping are dropped."""
        assert resolve_dependency("@repo/design-tokens", workspace) is None

    def test_external_scoped_package(self, workspace: WorkspaceMap) -> None:
        """Scoped external packages are kept with their scope."""
        assert resolve_dependency("@radix-ui/react-slot/dist", workspace) == "@radix-ui/react-slot"


class TestExtractDependencies:
    """Tests for extract_dependencies function."""

    def test_button_and_clsx(self, descriptor: ComponentDescriptor) -> None:
        """A shadcn primitive import plus clsx yields only clsx."""
        assert extract_dependencies(descriptor) == {"clsx"}

    def test_accepts_plain_contents(self) -> None:
        """An iterable of file contents works as well as a descriptor."""
        contents = [
            "import { codeToHtml } from 'shiki';",
            "import { CodeBlock } from '@repo/code-block';\nimport x from 'lodash/fp';",
        ]
        assert extract_dependencies(contents) == {"shiki", "lodash"}

    def test_deduplicates_across_files(self) -> None:
        """A package imported in several files appears once."""
        contents = ["import { a } from 'clsx';", "import { b } from 'clsx';"]
        assert extract_dependencies(contents) == {"clsx"}

    def test_no_files(self) -> None:
        """A descriptor without files has no dependencies."""
        assert extract_dependencies(ComponentDescriptor(name="empty")) == set()

    def test_custom_workspace(self) -> None:
        """Workspace conventions can be supplied explicitly."""
        workspace = WorkspaceMap(
            internal_prefix="@acme/",
            translations={"@acme/icons": "lucide-react"},
        )
        contents = ["import { Icon } from '@acme/icons/star';\nimport a from '@acme/other';"]
        assert extract_dependencies(contents, workspace) == {"lucide-react"}
