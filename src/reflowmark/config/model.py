# topmark:header:start
#
#   project      : ReflowMark
#   file         : model.py
#   file_relpath : src/reflowmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot handed to the comment engine.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Immutability:
    - `Config` stores tuples and is ``frozen=True``. Comment regions share one
      `Config` and never mutate it. Use `Config.thaw` → edit →
      `MutableConfig.freeze` for updates.

Layering:
    - Every `MutableConfig` field is tri-state (``None`` = inherit), so that a
      project file which only sets ``max_line_width`` does not reset the
      other options when merged over the defaults.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from reflowmark.config.io import (
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from reflowmark.config.keys import ArgKey, Toml
from reflowmark.config.logging import get_logger
from reflowmark.config.types import MeasurementMode
from reflowmark.constants import (
    DEFAULT_BREAK_TAGS,
    DEFAULT_FONT_SIZE,
    DEFAULT_IMMUTABLE_TAGS,
    DEFAULT_MAX_LINE_WIDTH,
    DEFAULT_NEWLINE_TAGS,
    DEFAULT_NO_FORMAT_TAG,
    DEFAULT_PARAGRAPH_TAGS,
    DEFAULT_PARAM_TAGS,
    DEFAULT_ROOT_TAGS,
    DEFAULT_TAB_SIZE,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    REFLOWMARK_TOML_NAME,
)
from reflowmark.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from reflowmark.config.io import TomlTable
    from reflowmark.config.logging import ReflowmarkLogger

# ArgsLike: generic mapping accepted by `MutableConfig.apply_overrides` (CLI namespaces and dicts).
ArgsLike = Mapping[str, Any]

logger: ReflowmarkLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for the comment engine.

    Field defaults equal the runtime defaults, so ``Config(max_line_width=40)``
    is a complete configuration.

    Attributes:
        max_line_width (int): Target line width in columns, decoration included.
        tab_size (int): Tab stop distance used by width measurement.
        clear_blank_lines (bool): Drop blank lines inside comments instead of keeping them.
        use_tabs_for_indent (bool): Render continuation-line indentation with tabs.
        format_doc_first_line (bool): Let documentation text start on the ``/**`` line.
            When False, multi-line documentation comments keep an upper border.
        measurement_mode (MeasurementMode): How widths are measured.
        indent_root_tags (bool): Indent continuation lines of a root tag paragraph
            (``@param``, ``@return``...) by the tag width plus one.
        new_line_for_parameter (bool): Start the description after a ``@param`` name
            on a new line.
        no_format_tag (str): Marker that disables formatting of the comment containing it.
        font_path (str | None): TrueType/OpenType font file used by pixel measurement.
        font_size (int): Point size of ``font_path``.
        root_tags (tuple[str, ...]): Documentation tags that start a tag paragraph.
        param_tags (tuple[str, ...]): Root tags followed by a parameter name.
        immutable_tags (tuple[str, ...]): HTML tags whose content is never reflowed.
        break_tags (tuple[str, ...]): HTML tags forcing a line break after them.
        paragraph_tags (tuple[str, ...]): HTML tags starting a new paragraph.
        newline_tags (tuple[str, ...]): HTML tags starting a new line.
        config_files (tuple[Path | str, ...]): Paths or identifiers of config sources used.
        diagnostics (tuple[Diagnostic, ...]): Warnings recorded while loading and merging.
    """

    max_line_width: int = DEFAULT_MAX_LINE_WIDTH
    tab_size: int = DEFAULT_TAB_SIZE
    clear_blank_lines: bool = False
    use_tabs_for_indent: bool = False
    format_doc_first_line: bool = True
    measurement_mode: MeasurementMode = MeasurementMode.CHAR
    indent_root_tags: bool = False
    new_line_for_parameter: bool = False
    no_format_tag: str = DEFAULT_NO_FORMAT_TAG
    font_path: str | None = None
    font_size: int = DEFAULT_FONT_SIZE

    root_tags: tuple[str, ...] = DEFAULT_ROOT_TAGS
    param_tags: tuple[str, ...] = DEFAULT_PARAM_TAGS
    immutable_tags: tuple[str, ...] = DEFAULT_IMMUTABLE_TAGS
    break_tags: tuple[str, ...] = DEFAULT_BREAK_TAGS
    paragraph_tags: tuple[str, ...] = DEFAULT_PARAGRAPH_TAGS
    newline_tags: tuple[str, ...] = DEFAULT_NEWLINE_TAGS

    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict.

        Returns:
            TomlTable: the TOML-serializable dict representing the Config
        """
        return {
            Toml.SECTION_FORMATTING: {
                Toml.KEY_MAX_LINE_WIDTH: self.max_line_width,
                Toml.KEY_TAB_SIZE: self.tab_size,
                Toml.KEY_CLEAR_BLANK_LINES: self.clear_blank_lines,
                Toml.KEY_USE_TABS_FOR_INDENT: self.use_tabs_for_indent,
                Toml.KEY_FORMAT_DOC_FIRST_LINE: self.format_doc_first_line,
                Toml.KEY_MEASUREMENT_MODE: self.measurement_mode.value,
                Toml.KEY_INDENT_ROOT_TAGS: self.indent_root_tags,
                Toml.KEY_NEW_LINE_FOR_PARAMETER: self.new_line_for_parameter,
                Toml.KEY_NO_FORMAT_TAG: self.no_format_tag,
                Toml.KEY_FONT_PATH: self.font_path,
                Toml.KEY_FONT_SIZE: self.font_size,
            },
            Toml.SECTION_TAGS: {
                Toml.KEY_ROOT_TAGS: list(self.root_tags),
                Toml.KEY_PARAM_TAGS: list(self.param_tags),
                Toml.KEY_IMMUTABLE_TAGS: list(self.immutable_tags),
                Toml.KEY_BREAK_TAGS: list(self.break_tags),
                Toml.KEY_PARAGRAPH_TAGS: list(self.paragraph_tags),
                Toml.KEY_NEWLINE_TAGS: list(self.newline_tags),
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            max_line_width=self.max_line_width,
            tab_size=self.tab_size,
            clear_blank_lines=self.clear_blank_lines,
            use_tabs_for_indent=self.use_tabs_for_indent,
            format_doc_first_line=self.format_doc_first_line,
            measurement_mode=self.measurement_mode,
            indent_root_tags=self.indent_root_tags,
            new_line_for_parameter=self.new_line_for_parameter,
            no_format_tag=self.no_format_tag,
            font_path=self.font_path,
            font_size=self.font_size,
            root_tags=list(self.root_tags),
            param_tags=list(self.param_tags),
            immutable_tags=list(self.immutable_tags),
            break_tags=list(self.break_tags),
            paragraph_tags=list(self.paragraph_tags),
            newline_tags=list(self.newline_tags),
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    This builder collects config from defaults, project files, extra files, and CLI
    overrides, then produces an immutable `Config` via `freeze`. Unset fields
    (``None``) fall back to the runtime defaults when frozen.
    """

    max_line_width: int | None = None
    tab_size: int | None = None
    clear_blank_lines: bool | None = None
    use_tabs_for_indent: bool | None = None
    format_doc_first_line: bool | None = None
    measurement_mode: MeasurementMode | None = None
    indent_root_tags: bool | None = None
    new_line_for_parameter: bool | None = None
    no_format_tag: str | None = None
    font_path: str | None = None
    font_size: int | None = None

    root_tags: list[str] | None = None
    param_tags: list[str] | None = None
    immutable_tags: list[str] | None = None
    break_tags: list[str] | None = None
    paragraph_tags: list[str] | None = None
    newline_tags: list[str] | None = None

    config_files: list[Path | str] = field(default_factory=lambda: [])

    # Collected diagnostics while loading / merging / sanitizing config.
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Applies `sanitize` first, then fills every unset field from the defaults.
        """
        self.sanitize()
        base = Config()

        def _pick(value: Any, default: Any) -> Any:
            return default if value is None else value

        def _tags(value: list[str] | None, default: tuple[str, ...]) -> tuple[str, ...]:
            return default if value is None else tuple(value)

        return Config(
            max_line_width=_pick(self.max_line_width, base.max_line_width),
            tab_size=_pick(self.tab_size, base.tab_size),
            clear_blank_lines=_pick(self.clear_blank_lines, base.clear_blank_lines),
            use_tabs_for_indent=_pick(self.use_tabs_for_indent, base.use_tabs_for_indent),
            format_doc_first_line=_pick(self.format_doc_first_line, base.format_doc_first_line),
            measurement_mode=_pick(self.measurement_mode, base.measurement_mode),
            indent_root_tags=_pick(self.indent_root_tags, base.indent_root_tags),
            new_line_for_parameter=_pick(
                self.new_line_for_parameter, base.new_line_for_parameter
            ),
            no_format_tag=_pick(self.no_format_tag, base.no_format_tag),
            font_path=_pick(self.font_path, base.font_path),
            font_size=_pick(self.font_size, base.font_size),
            root_tags=_tags(self.root_tags, base.root_tags),
            param_tags=_tags(self.param_tags, base.param_tags),
            immutable_tags=_tags(self.immutable_tags, base.immutable_tags),
            break_tags=_tags(self.break_tags, base.break_tags),
            paragraph_tags=_tags(self.paragraph_tags, base.paragraph_tags),
            newline_tags=_tags(self.newline_tags, base.newline_tags),
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )

    def sanitize(self) -> None:
        """Clamp numeric options into their valid ranges, recording a warning for each fix."""
        if self.max_line_width is not None and self.max_line_width < 1:
            self.diagnostics.add_warning(
                f"max_line_width must be at least 1 (got {self.max_line_width}); using 1"
            )
            self.max_line_width = 1
        if self.tab_size is not None and self.tab_size < 1:
            self.diagnostics.add_warning(
                f"tab_size must be at least 1 (got {self.tab_size}); using 1"
            )
            self.tab_size = 1
        if self.no_format_tag is not None and not self.no_format_tag.strip():
            self.diagnostics.add_warning("no_format_tag must not be empty; using the default")
            self.no_format_tag = None

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults.

        Returns:
            MutableConfig: A `MutableConfig` instance populated with default values.
        """
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``reflowmark.toml`` and ``pyproject.toml``; for the latter
        the ``[tool.reflowmark]`` table is extracted.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft config if successful; None if a
                ``pyproject.toml`` has no ``[tool.reflowmark]`` table.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, source=str(path))
        if draft.font_path is not None and not Path(draft.font_path).is_absolute():
            # Font paths in a config file are relative to that file
            draft.font_path = str(path.parent / draft.font_path)
        draft.config_files = [path]
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str = "<dict>") -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Unknown sections and keys are reported as info diagnostics. Values of
        the wrong type are reported as warnings and left unset.

        Args:
            data (TomlTable): The parsed TOML data as a dictionary.
            source (str): Name of the source, used in diagnostic locations.

        Returns:
            MutableConfig: The resulting MutableConfig instance.
        """
        draft = cls()
        diags: DiagnosticLog = draft.diagnostics

        known_sections = {Toml.SECTION_FORMATTING, Toml.SECTION_TAGS, Toml.KEY_ROOT}
        for key in data:
            if key not in known_sections:
                logger.info("Ignoring unknown key %r in %s", key, source)
                diags.add_info(f"Ignoring unknown key {key!r} in {source}")

        fmt: TomlTable = get_table_value(data, Toml.SECTION_FORMATTING)
        where = f"[{Toml.SECTION_FORMATTING}]"
        kw: dict[str, Any] = {"where": where, "diagnostics": diags, "logger": logger}

        draft.max_line_width = get_int_value_or_none_checked(
            fmt, Toml.KEY_MAX_LINE_WIDTH, minimum=1, **kw
        )
        draft.tab_size = get_int_value_or_none_checked(fmt, Toml.KEY_TAB_SIZE, minimum=1, **kw)
        draft.clear_blank_lines = get_bool_value_or_none_checked(
            fmt, Toml.KEY_CLEAR_BLANK_LINES, **kw
        )
        draft.use_tabs_for_indent = get_bool_value_or_none_checked(
            fmt, Toml.KEY_USE_TABS_FOR_INDENT, **kw
        )
        draft.format_doc_first_line = get_bool_value_or_none_checked(
            fmt, Toml.KEY_FORMAT_DOC_FIRST_LINE, **kw
        )
        draft.measurement_mode = get_enum_value_checked(
            fmt, Toml.KEY_MEASUREMENT_MODE, MeasurementMode, **kw
        )
        draft.indent_root_tags = get_bool_value_or_none_checked(
            fmt, Toml.KEY_INDENT_ROOT_TAGS, **kw
        )
        draft.new_line_for_parameter = get_bool_value_or_none_checked(
            fmt, Toml.KEY_NEW_LINE_FOR_PARAMETER, **kw
        )
        draft.no_format_tag = get_string_value_or_none_checked(fmt, Toml.KEY_NO_FORMAT_TAG, **kw)
        draft.font_path = get_string_value_or_none_checked(fmt, Toml.KEY_FONT_PATH, **kw)
        draft.font_size = get_int_value_or_none_checked(fmt, Toml.KEY_FONT_SIZE, minimum=1, **kw)

        tags: TomlTable = get_table_value(data, Toml.SECTION_TAGS)
        kw["where"] = f"[{Toml.SECTION_TAGS}]"
        draft.root_tags = get_string_list_value_or_none_checked(tags, Toml.KEY_ROOT_TAGS, **kw)
        draft.param_tags = get_string_list_value_or_none_checked(tags, Toml.KEY_PARAM_TAGS, **kw)
        draft.immutable_tags = get_string_list_value_or_none_checked(
            tags, Toml.KEY_IMMUTABLE_TAGS, **kw
        )
        draft.break_tags = get_string_list_value_or_none_checked(tags, Toml.KEY_BREAK_TAGS, **kw)
        draft.paragraph_tags = get_string_list_value_or_none_checked(
            tags, Toml.KEY_PARAGRAPH_TAGS, **kw
        )
        draft.newline_tags = get_string_list_value_or_none_checked(
            tags, Toml.KEY_NEWLINE_TAGS, **kw
        )
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned **root-most → nearest**. Within one directory
        ``pyproject.toml`` comes before ``reflowmark.toml`` so the latter wins
        a last-wins merge. A config setting ``root = true`` stops the walk
        after its directory.

        Args:
            start (Path): The Path instance where discovery starts.

        Returns:
            list[Path]: Discovered config file paths ordered for stable merging.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, REFLOWMARK_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                data: TomlTable = load_toml_dict(p)
                if name == PYPROJECT_TOML_NAME:
                    data = get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION)
                    if not data:
                        continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if data.get(Toml.KEY_ROOT) is True:
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Merge order (lowest → highest precedence):
            1) Built-in defaults
            2) Project configs discovered upward from ``anchor`` (root → nearest)
            3) Extra config files passed explicitly via ``--config``

        Args:
            anchor (Path | None): Discovery start (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit files merged last.
            no_config (bool): If True, skip project discovery.

        Returns:
            MutableConfig: A mutable configuration draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """

        def _last(mine: Any, theirs: Any) -> Any:
            return mine if theirs is None else theirs

        merged = MutableConfig(
            max_line_width=_last(self.max_line_width, other.max_line_width),
            tab_size=_last(self.tab_size, other.tab_size),
            clear_blank_lines=_last(self.clear_blank_lines, other.clear_blank_lines),
            use_tabs_for_indent=_last(self.use_tabs_for_indent, other.use_tabs_for_indent),
            format_doc_first_line=_last(self.format_doc_first_line, other.format_doc_first_line),
            measurement_mode=_last(self.measurement_mode, other.measurement_mode),
            indent_root_tags=_last(self.indent_root_tags, other.indent_root_tags),
            new_line_for_parameter=_last(
                self.new_line_for_parameter, other.new_line_for_parameter
            ),
            no_format_tag=_last(self.no_format_tag, other.no_format_tag),
            font_path=_last(self.font_path, other.font_path),
            font_size=_last(self.font_size, other.font_size),
            root_tags=_last(self.root_tags, other.root_tags),
            param_tags=_last(self.param_tags, other.param_tags),
            immutable_tags=_last(self.immutable_tags, other.immutable_tags),
            break_tags=_last(self.break_tags, other.break_tags),
            paragraph_tags=_last(self.paragraph_tags, other.paragraph_tags),
            newline_tags=_last(self.newline_tags, other.newline_tags),
            config_files=self.config_files + other.config_files,
        )
        merged.diagnostics.extend(self.diagnostics)
        merged.diagnostics.extend(other.diagnostics)
        return merged

    def apply_overrides(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Keys are the `ArgKey` names; a key that is absent or maps to None leaves
        the field unchanged.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This instance, updated in place.
        """
        logger.debug("Applying overrides to MutableConfig: %s", args)

        overridable = (
            ArgKey.MAX_LINE_WIDTH,
            ArgKey.TAB_SIZE,
            ArgKey.CLEAR_BLANK_LINES,
            ArgKey.USE_TABS_FOR_INDENT,
            ArgKey.FORMAT_DOC_FIRST_LINE,
            ArgKey.INDENT_ROOT_TAGS,
            ArgKey.NEW_LINE_FOR_PARAMETER,
            ArgKey.FONT_PATH,
            ArgKey.FONT_SIZE,
        )
        applied = False
        for key in overridable:
            value = args.get(key)
            if value is not None:
                setattr(self, key, value)
                applied = True

        mode = args.get(ArgKey.MEASUREMENT_MODE)
        if mode is not None:
            self.measurement_mode = MeasurementMode(mode)
            applied = True

        if applied:
            self.config_files.append(CLI_OVERRIDE_STR)
        return self
