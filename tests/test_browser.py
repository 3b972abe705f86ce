import pytest

from wiieat.browser import (
    MAXDISPLAY,
    MAXPATHLEN,
    PARENT_DISPLAY_NAME,
    Browser,
    BrowserEntry,
    entry_sort_key,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "beta").mkdir()
    (tmp_path / "Alpha").mkdir()
    (tmp_path / "zeta.txt").write_text("z")
    (tmp_path / "Apple.txt").write_text("a")
    sub = tmp_path / "beta" / "inner"
    sub.mkdir()
    (tmp_path / "beta" / "note.txt").write_text("n")
    return tmp_path


def _names(browser):
    return [entry.filename for entry in browser.entries]


def test_sort_key_orders_special_dirs_then_folders_then_files():
    entries = [
        BrowserEntry("b.txt"),
        BrowserEntry("..", isdir=True),
        BrowserEntry("Zed", isdir=True),
        BrowserEntry("a.txt"),
        BrowserEntry(".", isdir=True),
        BrowserEntry("alpha", isdir=True),
    ]
    ordered = sorted(entries, key=entry_sort_key)
    assert [e.filename for e in ordered] == [".", "..", "alpha", "Zed", "a.txt", "b.txt"]


def test_browse_device_lists_sorted_entries(tree):
    browser = Browser()
    count = browser.browse_device(str(tree))
    assert count == 5
    assert browser.num_entries == count
    assert _names(browser) == ["..", "Alpha", "beta", "Apple.txt", "zeta.txt"]
    assert browser.dir == "/"


def test_parent_entry_is_flagged_directory(tree):
    browser = Browser()
    browser.browse_device(str(tree))
    parent = browser.entries[0]
    assert parent.displayname == PARENT_DISPLAY_NAME
    assert parent.isdir is True
    assert [e.isdir for e in browser.entries[1:]] == [True, True, False, False]


def test_change_folder_enters_and_leaves(tree):
    browser = Browser()
    browser.browse_device(str(tree))
    browser.sel_index = _names(browser).index("beta")
    count = browser.change_folder()
    assert browser.dir == "//beta"
    assert count == 3
    assert _names(browser) == ["..", "inner", "note.txt"]
    assert browser.sel_index == 0

    browser.sel_index = 0
    browser.change_folder()
    assert browser.dir == "/"
    assert _names(browser) == ["..", "Alpha", "beta", "Apple.txt", "zeta.txt"]


def test_selecting_current_dir_changes_nothing():
    browser = Browser(dir="/keep", entries=[BrowserEntry(".", isdir=True)])
    assert browser.change_folder() is None
    assert browser.dir == "/keep"


def test_update_dir_name_rejects_too_long_path():
    browser = Browser(dir="/", entries=[BrowserEntry("x" * MAXPATHLEN, isdir=True)])
    with pytest.raises(ValueError):
        browser.update_dir_name()
    assert browser.dir == "/"


def test_missing_folder_falls_back_to_root(tree):
    browser = Browser(root=str(tree), dir="/does-not-exist")
    count = browser.parse_directory()
    assert browser.dir == "/"
    assert count == 5


def test_missing_root_raises(tmp_path):
    browser = Browser()
    with pytest.raises(OSError):
        browser.browse_device(str(tmp_path / "absent"))


def test_long_names_are_cropped_for_display(tmp_path):
    long_name = "n" * 60
    (tmp_path / long_name).write_text("data")
    browser = Browser()
    browser.browse_device(str(tmp_path))
    entry = browser.entries[1]
    assert entry.filename == long_name
    assert len(entry.displayname) == MAXDISPLAY
    assert long_name.startswith(entry.displayname)


def test_reset_clears_listing(tree):
    browser = Browser()
    browser.browse_device(str(tree))
    browser.sel_index = 2
    browser.page_index = 1
    browser.reset()
    assert browser.num_entries == 0
    assert (browser.sel_index, browser.page_index) == (0, 0)