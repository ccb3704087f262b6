"""Book configuration model and YAML loader.

Responsibilities:
- Define the book hierarchy (book, sections, chapters, scenes) as frozen dataclasses.
- Give every level the same optional output target and numbering flag.
- Load and validate the hierarchy from a YAML file.

Key types:
- `OutputTarget`: optional output path plus paragraph-numbering flag.
- `SceneSpec`, `ChapterSpec`, `SectionSpec`, `BookSpec`: configured hierarchy.
- `ConfigLoader`: static construction helpers for `BookSpec`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_permissive_boolean
from .text.numbering import DEFAULT_SCENE_SEPARATOR


@dataclass(frozen=True, slots=True)
class OutputTarget:
    """Where one hierarchy level writes its own text, if anywhere.

    Attributes:
        path: Output file path, or `None` when the level writes nothing.
        numbered: Whether paragraph markers are appended before writing.
    """

    path: Path | None = None
    numbered: bool = False

    @property
    def enabled(self) -> bool:
        return self.path is not None


@dataclass(frozen=True, slots=True)
class SceneSpec:
    """An ordered list of source files assembled together."""

    files: tuple[Path, ...] = ()
    target: OutputTarget = field(default_factory=OutputTarget)


@dataclass(frozen=True, slots=True)
class ChapterSpec:
    """A titled, ordered list of scenes."""

    title: str = ""
    scenes: tuple[SceneSpec, ...] = ()
    target: OutputTarget = field(default_factory=OutputTarget)


@dataclass(frozen=True, slots=True)
class SectionSpec:
    """A flat, titled list of source files outside the chapter hierarchy."""

    title: str = ""
    files: tuple[Path, ...] = ()
    target: OutputTarget = field(default_factory=OutputTarget)


@dataclass(frozen=True, slots=True)
class BookSpec:
    """Complete configuration for one manuscript build.

    Attributes:
        title: Book title; the title page is skipped when blank.
        summary: Summary blurb for the metadata block.
        authors: Author names in display order.
        dedication: Optional dedication file path.
        scene_separator: Marker line placed between consecutive scenes.
        strip_wiki_links: Whether `[[link]]` markup is unwrapped in source text.
        sections: Flat sections, assembled before chapters.
        chapters: Chapters in document order.
        target: Output target for the whole manuscript.
        summary_path: Optional path for the YAML statistics report.
    """

    title: str = ""
    summary: str = ""
    authors: tuple[str, ...] = ()
    dedication: Path | None = None
    scene_separator: str = DEFAULT_SCENE_SEPARATOR
    strip_wiki_links: bool = False
    sections: tuple[SectionSpec, ...] = ()
    chapters: tuple[ChapterSpec, ...] = ()
    target: OutputTarget = field(default_factory=OutputTarget)
    summary_path: Path | None = None


class ConfigLoader:
    """Factory methods for creating `BookSpec` from external sources."""

    _TARGET_KEYS = frozenset({"output_filename", "number_paragraphs"})
    _BOOK_KEYS = _TARGET_KEYS | frozenset(
        {
            "title",
            "summary",
            "authors",
            "dedication",
            "scene_separator",
            "strip_wiki_links",
            "sections",
            "chapters",
            "summary_filename",
        }
    )
    _SECTION_KEYS = _TARGET_KEYS | frozenset({"title", "files"})
    _CHAPTER_KEYS = _TARGET_KEYS | frozenset({"title", "scenes"})
    _SCENE_KEYS = _TARGET_KEYS | frozenset({"files"})

    @staticmethod
    def from_yaml(path: Path) -> BookSpec:
        """Create a validated book spec from a YAML file.

        Relative file paths inside the config resolve against the config
        file's directory.
        """

        path_text = Path(path).read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader.from_mapping(
            payload,
            base_dir=Path(path).parent,
            source_label=f"YAML `{path}`",
        )

    @staticmethod
    def from_mapping(
        payload: Mapping[str, Any],
        base_dir: Path | None = None,
        source_label: str = "config",
    ) -> BookSpec:
        """Create a validated book spec from an in-memory mapping."""

        ConfigLoader._validate_keys(payload, ConfigLoader._BOOK_KEYS, source_label)

        sections = tuple(
            ConfigLoader._build_section(item, base_dir, f"{source_label} sections[{index}]")
            for index, item in enumerate(
                ConfigLoader._optional_list(payload, "sections", source_label)
            )
        )
        chapters = tuple(
            ConfigLoader._build_chapter(item, base_dir, f"{source_label} chapters[{index}]")
            for index, item in enumerate(
                ConfigLoader._optional_list(payload, "chapters", source_label)
            )
        )
        separator = (
            ConfigLoader._optional_string(payload, "scene_separator", source_label)
            or DEFAULT_SCENE_SEPARATOR
        )

        return BookSpec(
            title=ConfigLoader._optional_string(payload, "title", source_label) or "",
            summary=ConfigLoader._optional_string(payload, "summary", source_label) or "",
            authors=ConfigLoader._authors(payload, source_label),
            dedication=ConfigLoader._optional_path(
                payload, "dedication", base_dir, source_label
            ),
            scene_separator=separator,
            strip_wiki_links=ConfigLoader._optional_boolean(
                payload, "strip_wiki_links", source_label
            ),
            sections=sections,
            chapters=chapters,
            target=ConfigLoader._build_target(payload, base_dir, source_label),
            summary_path=ConfigLoader._optional_path(
                payload, "summary_filename", base_dir, source_label
            ),
        )

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_section(item: object, base_dir: Path | None, label: str) -> SectionSpec:
        mapping = ConfigLoader._require_mapping(item, label)
        ConfigLoader._validate_keys(mapping, ConfigLoader._SECTION_KEYS, label)
        return SectionSpec(
            title=ConfigLoader._optional_string(mapping, "title", label) or "",
            files=ConfigLoader._files(mapping, base_dir, label),
            target=ConfigLoader._build_target(mapping, base_dir, label),
        )

    @staticmethod
    def _build_chapter(item: object, base_dir: Path | None, label: str) -> ChapterSpec:
        mapping = ConfigLoader._require_mapping(item, label)
        ConfigLoader._validate_keys(mapping, ConfigLoader._CHAPTER_KEYS, label)
        scenes = tuple(
            ConfigLoader._build_scene(scene, base_dir, f"{label} scenes[{index}]")
            for index, scene in enumerate(
                ConfigLoader._optional_list(mapping, "scenes", label)
            )
        )
        return ChapterSpec(
            title=ConfigLoader._optional_string(mapping, "title", label) or "",
            scenes=scenes,
            target=ConfigLoader._build_target(mapping, base_dir, label),
        )

    @staticmethod
    def _build_scene(item: object, base_dir: Path | None, label: str) -> SceneSpec:
        mapping = ConfigLoader._require_mapping(item, label)
        ConfigLoader._validate_keys(mapping, ConfigLoader._SCENE_KEYS, label)
        return SceneSpec(
            files=ConfigLoader._files(mapping, base_dir, label),
            target=ConfigLoader._build_target(mapping, base_dir, label),
        )

    @staticmethod
    def _build_target(
        payload: Mapping[str, Any], base_dir: Path | None, source_label: str
    ) -> OutputTarget:
        """Read the per-level `output_filename`/`number_paragraphs` pair."""

        return OutputTarget(
            path=ConfigLoader._optional_path(payload, "output_filename", base_dir, source_label),
            numbered=ConfigLoader._optional_boolean(payload, "number_paragraphs", source_label),
        )

    @staticmethod
    def _validate_keys(
        payload: Mapping[str, Any], supported: frozenset[str], source_label: str
    ) -> None:
        """Reject keys the loader does not understand."""

        unknown = sorted(str(key) for key in set(payload).difference(supported))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _require_mapping(item: object, source_label: str) -> Mapping[str, Any]:
        if not isinstance(item, Mapping):
            raise ValueError(f"{source_label} must be a mapping/object.")
        return item

    @staticmethod
    def _optional_list(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> list[Any]:
        """Read an optional list field, treating `null` as empty."""

        raw = payload.get(key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise ValueError(f"{source_label} field `{key}` must be a list.")
        return raw

    @staticmethod
    def _optional_string(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        value = payload[key]
        if isinstance(value, (list, dict)):
            raise ValueError(f"{source_label} field `{key}` must be a string.")
        return normalize_optional_string(value)

    @staticmethod
    def _optional_path(
        payload: Mapping[str, Any], key: str, base_dir: Path | None, source_label: str
    ) -> Path | None:
        value = ConfigLoader._optional_string(payload, key, source_label)
        if value is None:
            return None
        return ConfigLoader._resolve_path(value, base_dir)

    @staticmethod
    def _optional_boolean(payload: Mapping[str, Any], key: str, source_label: str) -> bool:
        """Read and validate a boolean field, defaulting to `False`."""

        if key not in payload or payload[key] is None:
            return False

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _authors(payload: Mapping[str, Any], source_label: str) -> tuple[str, ...]:
        """Read author names; a single string is accepted as one author."""

        raw = payload.get("authors")
        if raw is None:
            return ()
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list):
            raise ValueError(f"{source_label} field `authors` must be a list of names.")

        authors: list[str] = []
        for value in raw:
            name = normalize_optional_string(value)
            if name is None:
                raise ValueError(f"{source_label} field `authors` contains a blank name.")
            authors.append(name)
        return tuple(authors)

    @staticmethod
    def _files(
        payload: Mapping[str, Any], base_dir: Path | None, source_label: str
    ) -> tuple[Path, ...]:
        """Read an ordered list of non-blank source file paths."""

        files: list[Path] = []
        for value in ConfigLoader._optional_list(payload, "files", source_label):
            path_text = normalize_optional_string(value)
            if path_text is None:
                raise ValueError(f"{source_label} field `files` contains a blank path.")
            files.append(ConfigLoader._resolve_path(path_text, base_dir))
        return tuple(files)

    @staticmethod
    def _resolve_path(value: str, base_dir: Path | None) -> Path:
        path = Path(value)
        if base_dir is None or path.is_absolute():
            return path
        return base_dir / path
