"""Tests for content producers."""

import pytest

from pattern_hub.resources import FileProducer, FunctionProducer, ModuleProducer, StaticProducer


class TestSyncProducers:
    """Test producers that return text directly."""

    def test_static_producer(self):
        """Should return its text."""
        assert StaticProducer("# Hello").produce() == "# Hello"

    def test_module_producer_reads_attribute(self):
        """Should import the module and return the attribute."""
        producer = ModuleProducer("pattern_hub.catalogs.crm_base.content.ui_system", "DIALOG_PATTERNS")

        assert producer.produce().startswith("# Dialog Patterns")
        assert producer.describe() == "pattern_hub.catalogs.crm_base.content.ui_system:DIALOG_PATTERNS"

    def test_module_producer_calls_callables(self):
        """Should invoke callable attributes."""
        producer = ModuleProducer("pattern_hub.catalogs.agency.content.contracts", "render_sow_template")

        assert producer.produce().startswith("# Statement of Work Template")

    def test_module_producer_missing_module(self):
        """Should raise when the module does not exist."""
        with pytest.raises(ImportError):
            ModuleProducer("pattern_hub.catalogs.nope", "X").produce()

    def test_module_producer_missing_attribute(self):
        """Should raise when the attribute does not exist."""
        with pytest.raises(AttributeError):
            ModuleProducer("pattern_hub.catalogs.crm_base.content.ui_system", "NOPE").produce()

    def test_function_producer(self):
        """Should call the wrapped function."""
        def build():
            return "built"

        producer = FunctionProducer(build)

        assert producer.produce() == "built"
        assert producer.describe().endswith("build")


@pytest.mark.asyncio
class TestFileProducer:
    """Test file-backed producer."""

    async def test_reads_file(self, tmp_path):
        """Should read the file body as UTF-8."""
        path = tmp_path / "README-lab.md"
        path.write_text("# Laboratorio – guía", encoding="utf-8")

        content = await FileProducer(path).produce()

        assert content == "# Laboratorio – guía"

    async def test_missing_file(self, tmp_path):
        """Should raise when the file is gone."""
        with pytest.raises(FileNotFoundError):
            await FileProducer(tmp_path / "missing.md").produce()
