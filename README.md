# rucmeta

The system-management layer of a small relational database engine. It
covers the catalog, which records databases, tables, columns and indexes,
and the DDL operations on it. It renders tabular results into a bounded
reply buffer. It also holds the data structures for transactions and lock
identifiers.

## Installation

```
pip install .
```

For tests:

```
pip install ".[test]"
pytest
```

## Modules

- `rucmeta.defs` holds the record identifier `Rid` (frozen `page_no` and
  `slot_no`) and the column types `ColType` (`INT`, `FLOAT`, `STRING`).
  `coltype_to_str` returns a type's display name and raises `KeyError`
  for an unknown value. The module also defines the abstract cursor
  `RecScan` and the engine-wide constants: `PAGE_SIZE`, `BUFFER_LENGTH`,
  `DB_META_NAME` (`"db.meta"`), `LOG_FILE_NAME` (`"db.log"`) and others.
- `rucmeta.errors` holds the exception hierarchy rooted at `RMDBError`.
  Every message begins with `"Error: "`. Examples are
  `TableNotFoundError`, `IndexNotFoundError`, `StringOverflowError` and
  `DatabaseExistsError`.
- `rucmeta.common` contains the following:
  - `TabCol`, ordered by table name and then column name.
  - `Value`, built with `from_int`, `from_float` or `from_str`.
    `init_raw(length)` encodes the value into a fixed-length little-endian
    buffer. It raises `StringOverflowError` when a string does not fit and
    `InvalidColLengthError` when a number is given the wrong length.
  - `CompOp`, `Condition` and `SetClause`.
- `rucmeta.meta` holds the catalog metadata: `ColMeta`, `IndexMeta`,
  `TabMeta` and `DbMeta`.
  - `TabMeta` looks up columns (`is_col`, `get_col`) and indexes
    (`is_index`, `get_index_meta`).
  - `DbMeta` manages tables (`is_table`, `set_table`, `get_table`).
  - `DbMeta.dumps` writes the whitespace-separated text format of the
    `db.meta` file, with tables in name order. `DbMeta.loads` reads that
    format and raises `ValueError` on malformed input.
- `rucmeta.txn` contains the following:
  - The enums `TransactionState`, `IsolationLevel`, `WType`,
    `LockDataType` and `AbortReason`.
  - `WriteRecord`.
  - `LockDataId`, built with `LockDataId.table(fd)` or
    `LockDataId.record(fd, rid)`. `key()` packs the identifier into a
    signed 64-bit integer.
  - `TransactionAbortError`, whose `info()` gives a readable reason.
  - `Transaction`, with its write set, lock set and page sets.
- `rucmeta.printer` contains `Context` and `RecordPrinter`.
  - `Context` holds the reply buffer `data_send`, its `offset` and the
    `ellipsis` flag. `output()` returns the buffer as text.
  - `RecordPrinter` draws 16-character-wide bordered columns into that
    buffer. Cells longer than 16 characters are shortened and end in
    `...`. When the buffer is nearly full, the printer stops writing rows.
    `print_record_count` then adds `... ...` before the record count.
- `rucmeta.manager` contains `ColDef` and `SmManager`.
  - `is_dir`, `create_db` and `drop_db` work on database directories under
    `root`. `create_db` writes an empty `db.meta` and creates a `db.log`.
  - `create_table` computes column offsets, registers the table and calls
    `flush_meta` to write `db.meta` into `db_dir`.
  - `show_tables` and `desc_table` render into a `Context`.
    `show_tables` also appends the table list to `output.txt` in `db_dir`.
  - If you pass a disk manager or a record manager, `create_db` and
    `create_table` create and open their files through it.
- `rucmeta.transaction_manager` contains `ConcurrencyMode` and
  `TransactionManager`.
  - `TransactionManager.txn_map` is the global transaction table shared
    by all managers.
  - `get_transaction` returns `None` for the invalid id. It raises
    `InternalError` if the transaction is not registered, and also if the
    transaction belongs to another thread.

## Example

```python
from rucmeta.defs import ColType
from rucmeta.meta import ColMeta, DbMeta, TabMeta

tab = TabMeta(name="grade", cols=[
    ColMeta(tab_name="grade", name="id", type=ColType.INT, len=4, offset=0),
    ColMeta(tab_name="grade", name="name", type=ColType.STRING, len=16, offset=4),
])
db = DbMeta(name="school")
db.set_table("grade", tab)

text = db.dumps()
restored = DbMeta.loads(text)
assert restored.get_table("grade").get_col("name").offset == 4
```

Rendering a table into a reply buffer:

```python
from rucmeta.printer import Context, RecordPrinter

ctx = Context()
printer = RecordPrinter(2)
printer.print_separator(ctx)
printer.print_record(["id", "name"], ctx)
printer.print_separator(ctx)
RecordPrinter.print_record_count(0, ctx)
print(ctx.output())
```

## What this package does not do

This package is the metadata and bookkeeping layer only. It has none of
the following:

- **Storage.** There is no page storage, buffer pool, record file or
  index. `SmManager` accepts such collaborators but does not supply them.
- **Catalog operations beyond the basics.** `SmManager` cannot open or
  close a database, drop a table, or create or drop an index.
- **SQL and networking.** There is no SQL parser, planner, executor or
  server, and there is no command-line tool.
- **Transaction control.** There is no lock manager, and transactions
  cannot be begun, committed or aborted. `TransactionManager` only looks
  up transactions that are already in its table.