"""Unit tests for translation.repository.ResourceRepository."""

import pytest

from charcoal_translation.translation import ResourceRepository
from charcoal_translation.translation.repository import language_tag
from tests.factories.translation import make_resolver, write_json


@pytest.mark.unit
class TestLanguageTag:
    """Tests for language_tag."""

    @pytest.mark.parametrize(
        "path, tag, language",
        [
            ("messages.fr.json", "fr", "fr"),
            ("messages.fr_CA.json", "fr_CA", "fr"),
            ("messages.es-419.yaml", "es-419", "es"),
            ("fr/messages.json", "fr", "fr"),
            ("translations/pt-BR/menu.ini", "pt-BR", "pt"),
        ],
    )
    def test_tagged(self, path, tag, language):
        """Dotted and directory tags are found with their language part."""
        match = language_tag(path)
        assert match.group("tag") == tag
        assert match.group("language") == language

    @pytest.mark.parametrize("path", ["messages.json", "translations/messages.csv", "fr.json"])
    def test_untagged(self, path):
        """Paths without a language tag yield no match."""
        assert language_tag(path) is None


@pytest.mark.unit
class TestResourceRepositoryPaths:
    """Tests for path expansion."""

    def test_directory_expansion(self, translations_dir, tmp_path):
        """Directories expand to supported files, skipping hidden ones."""
        repository = ResourceRepository(["translations"], base_path=tmp_path)
        names = [path.relative_to(translations_dir).as_posix() for path in repository.paths()]
        assert names == ["messages.fr.json", "messages.json", "es/menu.yaml"]

    def test_single_file(self, translations_dir, tmp_path):
        """A single supported file is registered as is."""
        repository = ResourceRepository([translations_dir / "messages.json"], base_path=tmp_path)
        assert repository.paths() == [translations_dir / "messages.json"]

    def test_unsupported_and_missing_paths_ignored(self, translations_dir, tmp_path):
        """Unsupported and missing paths are not registered."""
        repository = ResourceRepository(
            [translations_dir / "notes.txt", tmp_path / "missing"], base_path=tmp_path
        )
        assert repository.paths() == []

    def test_prepend_path(self, translations_dir, tmp_path):
        """prepend_path() puts the expanded files first."""
        repository = ResourceRepository([translations_dir / "messages.json"], base_path=tmp_path)
        repository.prepend_path(translations_dir / "es")
        assert repository.paths()[0] == translations_dir / "es" / "menu.yaml"


@pytest.mark.unit
class TestResourceRepositoryLoad:
    """Tests for ResourceRepository.load."""

    def test_load_all_languages(self, translations_dir, tmp_path):
        """load() tags monolingual files and keeps multilingual ones untagged."""
        resources = ResourceRepository(["translations"], base_path=tmp_path).load()

        by_name = {resource.path.name: resource for resource in resources}
        assert by_name["messages.fr.json"].source_language == "fr"
        assert dict(by_name["messages.fr.json"]) == {"farewell": "Au revoir", "menu.home": "Accueil"}
        assert by_name["messages.json"].source_language is None
        assert by_name["menu.yaml"].source_language == "es"

    def test_language_subset_excludes_tagged_files(self, translations_dir, tmp_path):
        """Files tagged with other languages are skipped."""
        repository = ResourceRepository(["translations"], base_path=tmp_path)
        resources = repository.load(["en", "es"])

        assert [resource.path.name for resource in resources] == ["messages.json", "menu.yaml"]
        assert repository.ident() == "all"

    def test_no_paths_returns_none(self):
        """load() returns None without paths."""
        assert ResourceRepository().load() is None

    def test_empty_resources_dropped(self, tmp_path):
        """Empty resources are not returned."""
        write_json(tmp_path / "empty.json", {})
        assert ResourceRepository(["empty.json"], base_path=tmp_path).load() == []

    def test_cached_per_subset(self, translations_dir, tmp_path, memory_pool):
        """Loads are cached per subset and returned as copies."""
        repository = ResourceRepository(["translations"], base_path=tmp_path, cache=memory_pool)
        first = repository.load(["fr"])

        write_json(translations_dir / "messages.fr.json", {"farewell": "Adieu"})

        cached = repository.load(["fr"])
        assert cached == first
        assert cached is not first
        assert dict(cached[0]) == {"farewell": "Au revoir", "menu.home": "Accueil"}
        assert memory_pool.get_item("translations/resources/fr").is_hit()

    def test_subset_load_leaves_default_ident(self, translations_dir, tmp_path):
        """load(ident) does not narrow later loads without an ident."""
        repository = ResourceRepository(["translations"], base_path=tmp_path)
        repository.load(["en"])

        names = [resource.path.name for resource in repository.load()]
        assert names == ["messages.fr.json", "messages.json", "menu.yaml"]

    def test_file_removed_after_registration_is_skipped(self, translations_dir, tmp_path):
        """A registered file deleted before load() is skipped."""
        repository = ResourceRepository(["translations"], base_path=tmp_path)
        (translations_dir / "messages.fr.json").unlink()

        names = [resource.path.name for resource in repository.load()]
        assert names == ["messages.json", "menu.yaml"]

    def test_load_catalog(self, translations_dir, tmp_path):
        """load_catalog() builds a catalog from the loaded resources."""
        repository = ResourceRepository(["translations"], base_path=tmp_path, ident=["en", "fr"])
        catalog = repository.load_catalog(make_resolver())

        assert catalog.translate("greeting", "fr") == "Bonjour"
        assert catalog.translate("menu.home", "fr") == "Accueil"
        assert catalog.translate("menu.home", "en") == "menu.home"
