import pytest

from rucmeta.defs import DB_META_NAME, LOG_FILE_NAME, ColType
from rucmeta.errors import DatabaseExistsError, DatabaseNotFoundError, TableExistsError, TableNotFoundError
from rucmeta.manager import ColDef, SmManager
from rucmeta.meta import DbMeta
from rucmeta.printer import Context, RecordPrinter


class FakeRmManager:
    def __init__(self):
        self.created = []
        self.opened = []

    def create_file(self, name, record_size):
        self.created.append((name, record_size))

    def open_file(self, name):
        self.opened.append(name)
        return ("handle", name)


class FakeDiskManager:
    def __init__(self):
        self.files = []

    def create_file(self, path):
        self.files.append(path)


@pytest.fixture
def manager(tmp_path):
    return SmManager(rm_manager=FakeRmManager(), root=tmp_path, db_dir=tmp_path)


def test_create_db_writes_meta_and_log(tmp_path):
    sm = SmManager(root=tmp_path)
    sm.create_db("shop")
    assert sm.is_dir("shop")
    meta = DbMeta.loads((tmp_path / "shop" / DB_META_NAME).read_text())
    assert meta.name == "shop"
    assert meta.tabs == {}
    assert (tmp_path / "shop" / LOG_FILE_NAME).is_file()


def test_create_db_uses_disk_manager_for_log(tmp_path):
    disk = FakeDiskManager()
    sm = SmManager(disk, root=tmp_path)
    sm.create_db("shop")
    assert len(disk.files) == 1
    assert disk.files[0].endswith(LOG_FILE_NAME)


def test_create_db_twice_raises(tmp_path):
    sm = SmManager(root=tmp_path)
    sm.create_db("shop")
    with pytest.raises(DatabaseExistsError):
        sm.create_db("shop")


def test_drop_db(tmp_path):
    sm = SmManager(root=tmp_path)
    sm.create_db("shop")
    sm.drop_db("shop")
    assert not sm.is_dir("shop")
    with pytest.raises(DatabaseNotFoundError):
        sm.drop_db("shop")


def test_create_table_offsets_and_record_file(manager):
    manager.create_table("table1", [ColDef("col1", ColType.INT, 4), ColDef("col2", ColType.INT, 4)])
    tab = manager.db.get_table("table1")
    assert [c.offset for c in tab.cols] == [0, 4]
    assert all(not c.index for c in tab.cols)
    assert manager.rm_manager.created == [("table1", 8)]
    assert manager.fhs["table1"] == ("handle", "table1")


def test_create_table_twice_raises(manager):
    manager.create_table("t", [ColDef("a", ColType.INT, 4)])
    with pytest.raises(TableExistsError):
        manager.create_table("t", [ColDef("a", ColType.INT, 4)])
    assert manager.rm_manager.created == [("t", 4)]


def test_desc_table_matches_printer(manager):
    manager.create_table("t", [ColDef("a", ColType.INT, 4), ColDef("b", ColType.FLOAT, 4)])
    ctx = Context()
    manager.desc_table("t", ctx)

    expected = Context()
    printer = RecordPrinter(3)
    printer.print_separator(expected)
    printer.print_record(["Field", "Type", "Index"], expected)
    printer.print_separator(expected)
    printer.print_record(["a", "INT", "NO"], expected)
    printer.print_record(["b", "FLOAT", "NO"], expected)
    printer.print_separator(expected)
    assert ctx.output() == expected.output()


def test_desc_missing_table_raises(manager):
    with pytest.raises(TableNotFoundError):
        manager.desc_table("nope", Context())


def test_show_tables_writes_output_file(manager, tmp_path):
    manager.create_table("b", [ColDef("x", ColType.INT, 4)])
    manager.create_table("a", [ColDef("x", ColType.INT, 4)])
    ctx = Context()
    manager.show_tables(ctx)
    assert (tmp_path / "output.txt").read_text() == "| Tables |\n| a |\n| b |\n"
    out = ctx.output()
    assert out.index("a |") < out.index("b |")
    assert out.count("\n") == 6