"""Tests for import-based file classification."""

from ui_adoption.config import TrackerConfig
from ui_adoption.exceptions import FileAccessError
from ui_adoption.models import Category
from ui_adoption.scanning.classifier import (
    FileClassifier,
    classify,
    extract_legacy_dependencies,
    extract_target_dependencies,
)

TARGET_IDS = ("@mui/material", "@mui/icons-material")
LEGACY_IDS = ("legacy-lib", "react-bootstrap")


class TestClassify:
    """Test the category decision table."""

    def test_target_only(self):
        imports = ["react", "@mui/material/Button", "@mui/icons-material/Close"]
        assert classify(imports, TARGET_IDS, LEGACY_IDS) is Category.TARGET

    def test_legacy_only(self):
        imports = ["react", "react-bootstrap/Modal"]
        assert classify(imports, TARGET_IDS, LEGACY_IDS) is Category.LEGACY

    def test_both_is_mixed(self):
        imports = ["legacy-lib/Modal", "@mui/material/Dialog"]
        assert classify(imports, TARGET_IDS, LEGACY_IDS) is Category.MIXED

    def test_neither_is_no_ui(self):
        imports = ["react", "lodash", "./helpers"]
        assert classify(imports, TARGET_IDS, LEGACY_IDS) is Category.NO_UI

    def test_no_imports_is_no_ui(self):
        assert classify([], TARGET_IDS, LEGACY_IDS) is Category.NO_UI

    def test_substring_match(self):
        assert classify(["@scope/legacy-lib-extras"], TARGET_IDS, LEGACY_IDS) is Category.LEGACY

    def test_same_inputs_same_category(self):
        imports = ["legacy-lib", "@mui/material"]
        results = {classify(imports, TARGET_IDS, LEGACY_IDS) for _ in range(5)}
        assert results == {Category.MIXED}


class TestDependencyExtraction:
    """Matched dependency lists keep order and duplicates."""

    def test_legacy_dependencies_in_order(self):
        imports = ["react-bootstrap/Modal", "react", "legacy-lib", "react-bootstrap/Modal"]
        assert extract_legacy_dependencies(imports, LEGACY_IDS) == [
            "react-bootstrap/Modal",
            "legacy-lib",
            "react-bootstrap/Modal",
        ]

    def test_target_dependencies_verbatim(self):
        imports = ["@mui/material/Button", "lodash"]
        assert extract_target_dependencies(imports, TARGET_IDS) == ["@mui/material/Button"]

    def test_no_matches(self):
        assert extract_legacy_dependencies(["react"], LEGACY_IDS) == []


class TestFileClassifier:
    """Test FileClassifier against files on disk."""

    def test_classify_text_builds_record(self, config):
        classifier = FileClassifier(config)
        text = "import Dialog from '@mui/material/Dialog';\nimport M from 'legacy-lib/Modal';\n"

        record = classifier.classify_text("packages/modules/src/Panel.tsx", text, author="alice")

        assert record.category is Category.MIXED
        assert record.module == "modules"
        assert record.component == "Panel.tsx"
        assert record.legacy_dependencies == ("legacy-lib/Modal",)
        assert record.target_dependencies == ("@mui/material/Dialog",)
        assert record.author == "alice"

    def test_classify_file_reads_from_root(self, config):
        record = FileClassifier(config).classify_file("packages/components/src/OldModal.jsx")

        assert record.category is Category.LEGACY
        assert record.legacy_dependencies == ("react-bootstrap", "react-select")
        assert record.author is None

    def test_missing_file_is_no_ui(self, config):
        record = FileClassifier(config).classify_file("packages/components/src/Gone.tsx")

        assert record.category is Category.NO_UI
        assert record.legacy_dependencies == ()

    def test_undecodable_file_is_no_ui(self, config, frontend_repo):
        bad = frontend_repo / "packages/components/src/Binary.tsx"
        bad.write_bytes(b"import x from '@mui/material';\n\xff\xfe\xfa")

        record = FileClassifier(config).classify_file("packages/components/src/Binary.tsx")

        assert record.category is Category.NO_UI

    def test_reader_failure_is_no_ui(self, config):
        def failing_reader(path):
            raise FileAccessError(path, "permission denied")

        classifier = FileClassifier(config, reader=failing_reader)
        record = classifier.classify_file("packages/components/src/Save.tsx", author="bob")

        assert record.category is Category.NO_UI
        assert record.author == "bob"

    def test_custom_library_lists(self, frontend_repo):
        config = TrackerConfig(
            source_repo_path=str(frontend_repo),
            target_libraries=("react",),
            legacy_libraries=("nothing-matches",),
        )
        record = FileClassifier(config).classify_file("packages/components/src/OldModal.jsx")

        # "react" is a substring of every import in the file
        assert record.category is Category.TARGET
