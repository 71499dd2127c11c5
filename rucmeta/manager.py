"""System manager: database directories, table metadata and DDL statements."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from .defs import DB_META_NAME, LOG_FILE_NAME, ColType, coltype_to_str
from .errors import DatabaseExistsError, DatabaseNotFoundError, TableExistsError, UnixError
from .meta import ColMeta, DbMeta, TabMeta
from .printer import Context, RecordPrinter

OUTPUT_FILE_NAME = "output.txt"


@dataclass(frozen=True)
class ColDef:
    """A column as declared in CREATE TABLE."""

    name: str
    type: ColType
    len: int


class SmManager:
    """Manages database metadata and runs DDL statements.

    ``root`` is the directory that holds database directories; ``db_dir`` is the
    directory of the database in use, where metadata and output files go.
    Storage collaborators are optional; when a record manager is given, table
    files are created and opened through it.
    """

    def __init__(
        self,
        disk_manager: Any = None,
        buffer_pool_manager: Any = None,
        rm_manager: Any = None,
        ix_manager: Any = None,
        *,
        root: str | Path = ".",
        db_dir: str | Path | None = None,
    ) -> None:
        self.disk_manager = disk_manager
        self.buffer_pool_manager = buffer_pool_manager
        self.rm_manager = rm_manager
        self.ix_manager = ix_manager
        self.root = Path(root)
        self.db_dir = Path(db_dir) if db_dir is not None else self.root
        self.db = DbMeta()
        self.fhs: dict[str, Any] = {}
        self.ihs: dict[str, Any] = {}

    def _db_path(self, db_name: str) -> Path:
        return self.root / db_name

    def is_dir(self, db_name: str) -> bool:
        """Whether a database directory of that name exists."""
        return self._db_path(db_name).is_dir()

    def create_db(self, db_name: str) -> None:
        """Create the database directory with empty metadata and a log file."""
        if self.is_dir(db_name):
            raise DatabaseExistsError(db_name)
        path = self._db_path(db_name)
        try:
            path.mkdir(parents=True)
            (path / DB_META_NAME).write_text(DbMeta(db_name).dumps(), encoding="utf-8")
        except OSError as exc:
            raise UnixError(exc.errno) from exc
        log_path = path / LOG_FILE_NAME
        if self.disk_manager is not None:
            self.disk_manager.create_file(str(log_path))
        else:
            try:
                log_path.touch(exist_ok=False)
            except OSError as exc:
                raise UnixError(exc.errno) from exc

    def drop_db(self, db_name: str) -> None:
        """Remove the database directory and everything in it."""
        if not self.is_dir(db_name):
            raise DatabaseNotFoundError(db_name)
        try:
            shutil.rmtree(self._db_path(db_name))
        except OSError as exc:
            raise UnixError(exc.errno) from exc

    def flush_meta(self) -> None:
        """Write the current database metadata to disk, replacing the old file."""
        try:
            (self.db_dir / DB_META_NAME).write_text(self.db.dumps(), encoding="utf-8")
        except OSError as exc:
            raise UnixError(exc.errno) from exc

    def show_tables(self, context: Context) -> None:
        """List the tables into the reply buffer and append them to the output file."""
        lines = ["| Tables |\n"]
        printer = RecordPrinter(1)
        printer.print_separator(context)
        printer.print_record(["Tables"], context)
        printer.print_separator(context)
        for key in sorted(self.db.tabs):
            tab = self.db.tabs[key]
            printer.print_record([tab.name], context)
            lines.append(f"| {tab.name} |\n")
        printer.print_separator(context)
        with open(self.db_dir / OUTPUT_FILE_NAME, "a", encoding="utf-8") as outfile:
            outfile.writelines(lines)

    def desc_table(self, tab_name: str, context: Context) -> None:
        """Describe the columns of a table into the reply buffer."""
        tab = self.db.get_table(tab_name)
        captions = ["Field", "Type", "Index"]
        printer = RecordPrinter(len(captions))
        printer.print_separator(context)
        printer.print_record(captions, context)
        printer.print_separator(context)
        for col in tab.cols:
            printer.print_record(
                [col.name, coltype_to_str(col.type), "YES" if col.index else "NO"], context
            )
        printer.print_separator(context)

    def create_table(
        self, tab_name: str, col_defs: Sequence[ColDef], context: Context | None = None
    ) -> None:
        """Register a table, create its record file and persist the metadata."""
        if self.db.is_table(tab_name):
            raise TableExistsError(tab_name)
        tab = TabMeta(tab_name)
        offset = 0
        for col_def in col_defs:
            tab.cols.append(
                ColMeta(
                    tab_name=tab_name,
                    name=col_def.name,
                    type=ColType(col_def.type),
                    len=col_def.len,
                    offset=offset,
                    index=False,
                )
            )
            offset += col_def.len
        record_size = offset
        if self.rm_manager is not None:
            self.rm_manager.create_file(tab_name, record_size)
        self.db.tabs[tab_name] = tab
        if self.rm_manager is not None:
            self.fhs.setdefault(tab_name, self.rm_manager.open_file(tab_name))
        self.flush_meta()