"""Tests for the in-memory window/buffer/frame registry."""

import tempfile
from pathlib import Path

import pytest

from window_commands.exceptions import (
    BufferNotFoundError,
    FileVisitError,
    FrameNotFoundError,
    LastFrameError,
    LastWindowError,
    WindowNotFoundError,
    WindowTooSmallError,
)
from window_commands.layout_store import InMemoryLayoutStore
from window_commands.models import AppConfig, AppSettings, FrameSettings, SplitAxis
from window_commands.ports import LayoutStore


class TestInitialState:
    """Test a freshly created store."""

    def test_implements_protocol(self):
        assert isinstance(InMemoryLayoutStore(), LayoutStore)

    def test_one_frame_one_window_scratch(self):
        store = InMemoryLayoutStore()
        assert len(store.frame_list()) == 1
        assert len(store.window_list()) == 1
        assert store.window_buffer().name == "*scratch*"
        assert store.window_edges().as_tuple() == (0, 0, 160, 48)

    def test_from_config(self):
        config = AppConfig(
            settings=AppSettings(scratch_buffer_name="*notes*"),
            frame=FrameSettings(width=100, height=30),
        )
        store = InMemoryLayoutStore.from_config(config)
        assert store.window_buffer().name == "*notes*"
        assert store.window_edges().as_tuple() == (0, 0, 100, 30)

    def test_from_config_carries_other_window_split(self):
        config = AppConfig(settings=AppSettings(other_window_split=SplitAxis.HORIZONTAL))
        store = InMemoryLayoutStore.from_config(config)
        assert store.other_window_split is SplitAxis.HORIZONTAL
        assert InMemoryLayoutStore().other_window_split is SplitAxis.VERTICAL

    @pytest.mark.parametrize("width, height", [(1, 48), (160, 1), (0, 0), (-4, 10)])
    def test_unsplittable_frame_size_rejected(self, width, height):
        with pytest.raises(ValueError):
            InMemoryLayoutStore(width=width, height=height)


class TestSplitWindow:
    """Test splitting windows and the resulting geometry."""

    def test_vertical_split_puts_new_window_right(self):
        store = InMemoryLayoutStore()
        original = store.selected_window()

        new = store.split_window(axis=SplitAxis.VERTICAL)

        assert store.window_list() == [original, new]
        assert original.edges.as_tuple() == (0, 0, 80, 48)
        assert new.edges.as_tuple() == (80, 0, 160, 48)

    def test_horizontal_split_puts_new_window_below(self):
        store = InMemoryLayoutStore()
        original = store.selected_window()

        new = store.split_window(axis=SplitAxis.HORIZONTAL)

        assert store.window_list() == [original, new]
        assert original.edges.as_tuple() == (0, 0, 160, 24)
        assert new.edges.as_tuple() == (0, 24, 160, 48)

    def test_odd_sizes_give_remainder_to_second(self):
        store = InMemoryLayoutStore(width=81, height=25)
        new = store.split_window(axis=SplitAxis.VERTICAL)
        assert store.window_edges().as_tuple() == (0, 0, 40, 25)
        assert new.edges.as_tuple() == (40, 0, 81, 25)

    def test_new_window_shares_buffer_and_history(self):
        store = InMemoryLayoutStore()
        store.set_window_buffer(None, store.get_buffer_create("a"))

        new = store.split_window()

        assert new.buffer is store.window_buffer()
        assert store.window_prev_buffers(new) == store.window_prev_buffers()
        assert new.history is not store.selected_window().history

    def test_selection_unchanged(self):
        store = InMemoryLayoutStore()
        original = store.selected_window()
        store.split_window()
        assert store.selected_window() is original

    def test_nested_reading_order(self):
        store = InMemoryLayoutStore()
        first = store.selected_window()
        right = store.split_window(axis=SplitAxis.VERTICAL)
        lower_left = store.split_window(first, SplitAxis.HORIZONTAL)

        assert store.window_list() == [first, lower_left, right]
        assert lower_left.edges.as_tuple() == (0, 24, 80, 48)

    def test_too_narrow_window_raises(self):
        """A one-column window can't be split side by side."""
        store = InMemoryLayoutStore(width=3, height=4)
        left = store.selected_window()
        right = store.split_window(axis=SplitAxis.VERTICAL)
        assert left.edges.width == 1

        with pytest.raises(WindowTooSmallError) as exc_info:
            store.split_window(left, SplitAxis.VERTICAL)

        assert exc_info.value.context == {"window_id": left.id, "axis": "vertical", "size": 1}
        assert store.window_list() == [left, right]
        assert left.edges.as_tuple() == (0, 0, 1, 4)
        assert right.edges.as_tuple() == (1, 0, 3, 4)

    def test_too_short_window_raises(self):
        store = InMemoryLayoutStore(width=10, height=2)
        top = store.selected_window()
        store.split_window(axis=SplitAxis.HORIZONTAL)

        with pytest.raises(WindowTooSmallError):
            store.split_window(top, SplitAxis.HORIZONTAL)
        # The other axis still has room
        store.split_window(top, SplitAxis.VERTICAL)
        assert len(store.window_list()) == 3


class TestDeleteWindow:
    """Test removing windows from a frame."""

    def test_sibling_takes_space(self):
        store = InMemoryLayoutStore()
        original = store.selected_window()
        new = store.split_window(axis=SplitAxis.VERTICAL)

        store.delete_window(new)

        assert store.window_list() == [original]
        assert original.edges.as_tuple() == (0, 0, 160, 48)

    def test_deleting_selected_selects_sibling(self):
        store = InMemoryLayoutStore()
        new = store.split_window()

        store.delete_window()

        assert store.selected_window() is new

    def test_deleting_selected_selects_first_of_sibling_subtree(self):
        store = InMemoryLayoutStore()
        first = store.selected_window()
        right = store.split_window(axis=SplitAxis.VERTICAL)
        right_lower = store.split_window(right, SplitAxis.HORIZONTAL)

        store.delete_window(first)

        assert store.window_list() == [right, right_lower]
        assert store.selected_window() is right
        assert right.edges.as_tuple() == (0, 0, 160, 24)

    def test_sole_window_raises(self):
        store = InMemoryLayoutStore()
        with pytest.raises(LastWindowError):
            store.delete_window()

    def test_dead_window_raises(self):
        store = InMemoryLayoutStore()
        new = store.split_window()
        store.delete_window(new)
        with pytest.raises(WindowNotFoundError):
            store.delete_window(new)

    def test_delete_other_windows(self):
        store = InMemoryLayoutStore()
        store.split_window(axis=SplitAxis.VERTICAL)
        keep = store.split_window(axis=SplitAxis.HORIZONTAL)

        store.delete_other_windows(keep)

        assert store.window_list() == [keep]
        assert store.selected_window() is keep
        assert keep.edges.as_tuple() == (0, 0, 160, 48)


class TestSelection:
    """Test window and frame selection."""

    def test_next_window_wraps(self):
        store = InMemoryLayoutStore()
        first = store.selected_window()
        second = store.split_window()
        assert store.next_window(first) is second
        assert store.next_window(second) is first

    def test_next_window_single(self):
        store = InMemoryLayoutStore()
        assert store.next_window() is store.selected_window()

    def test_select_window_in_other_frame_selects_frame(self):
        store = InMemoryLayoutStore()
        frame = store.make_frame()
        window = store.window_list(frame)[0]

        store.select_window(window)

        assert store.selected_frame() is frame
        assert store.selected_window() is window

    def test_select_unknown_frame_raises(self):
        store = InMemoryLayoutStore()
        frame = store.make_frame()
        store.delete_frame(frame)
        with pytest.raises(FrameNotFoundError):
            store.select_frame(frame)


class TestFrames:
    """Test frame creation and deletion."""

    def test_make_frame_shows_current_buffer(self):
        store = InMemoryLayoutStore()
        frame = store.make_frame()
        assert store.window_list(frame)[0].buffer is store.window_buffer()
        assert store.selected_frame() is not frame

    def test_make_frame_with_dead_buffer_raises(self):
        store = InMemoryLayoutStore()
        buffer = store.get_buffer_create("gone")
        store.kill_buffer(buffer)
        with pytest.raises(BufferNotFoundError):
            store.make_frame(buffer)

    def test_delete_selected_frame_selects_next(self):
        store = InMemoryLayoutStore()
        first = store.selected_frame()
        second = store.make_frame()
        third = store.make_frame()
        store.select_frame(second)

        store.delete_frame()

        assert store.frame_list() == [first, third]
        assert store.selected_frame() is third

    def test_delete_last_frame_in_list_wraps(self):
        store = InMemoryLayoutStore()
        first = store.selected_frame()
        second = store.make_frame()
        store.select_frame(second)

        store.delete_frame()

        assert store.selected_frame() is first

    def test_delete_only_frame_raises(self):
        store = InMemoryLayoutStore()
        with pytest.raises(LastFrameError):
            store.delete_frame()


class TestBuffers:
    """Test buffer display, history, and killing."""

    def test_set_window_buffer_records_history(self):
        store = InMemoryLayoutStore()
        scratch = store.window_buffer()
        a = store.get_buffer_create("a")
        b = store.get_buffer_create("b")

        store.set_window_buffer(None, a)
        store.set_window_buffer(None, b)
        store.set_window_buffer(None, a)

        assert store.window_prev_buffers() == [b, scratch]

    def test_set_same_buffer_is_noop(self):
        store = InMemoryLayoutStore()
        store.set_window_buffer(None, store.window_buffer())
        assert store.window_prev_buffers() == []

    def test_get_buffer_create_reuses(self):
        store = InMemoryLayoutStore()
        assert store.get_buffer_create("a") is store.get_buffer_create("a")
        assert store.get_buffer("missing") is None

    def test_kill_buffer_shows_previous_buffer(self):
        store = InMemoryLayoutStore()
        scratch = store.window_buffer()
        a = store.get_buffer_create("a")
        store.set_window_buffer(None, a)

        store.kill_buffer(a)

        assert store.window_buffer() is scratch
        assert a not in store.buffer_list()
        assert store.window_prev_buffers() == []

    def test_kill_buffer_prefers_undisplayed_buffer(self):
        store = InMemoryLayoutStore()
        hidden = store.get_buffer_create("hidden")
        a = store.make_frame(store.get_buffer_create("a"))
        window = store.window_list(a)[0]

        store.kill_buffer(window.buffer)

        assert window.buffer is hidden

    def test_kill_buffer_removes_from_all_histories(self):
        store = InMemoryLayoutStore()
        a = store.get_buffer_create("a")
        store.set_window_buffer(None, a)
        other = store.split_window()
        store.set_window_buffer(other, store.get_buffer_create("b"))

        store.kill_buffer(a)

        assert a not in store.window_prev_buffers(other)

    def test_kill_last_buffer_recreates_scratch(self):
        store = InMemoryLayoutStore()
        scratch = store.window_buffer()

        store.kill_buffer()

        assert store.window_buffer() is not scratch
        assert store.window_buffer().name == "*scratch*"
        assert store.buffer_list() == [store.window_buffer()]

    def test_kill_dead_buffer_raises(self):
        store = InMemoryLayoutStore()
        a = store.get_buffer_create("a")
        store.kill_buffer(a)
        with pytest.raises(BufferNotFoundError):
            store.kill_buffer(a)


class TestFindFile:
    """Test visiting files into buffers."""

    def test_reads_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "notes.txt"
            path.write_text("hello\n", encoding="utf-8")
            store = InMemoryLayoutStore()

            buffer = store.find_file(path)

            assert buffer.name == "notes.txt"
            assert buffer.text == "hello\n"
            assert buffer.file_path == path.resolve()
            assert buffer in store.buffer_list()

    def test_same_file_reuses_buffer(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "notes.txt"
            path.write_text("hello", encoding="utf-8")
            store = InMemoryLayoutStore()

            assert store.find_file(path) is store.find_file(str(path))

    def test_same_name_is_uniquified(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            first = Path(tmpdir) / "one" / "README"
            second = Path(tmpdir) / "two" / "README"
            third = Path(tmpdir) / "three" / "README"
            for path in (first, second, third):
                path.parent.mkdir()
                path.write_text(path.parent.name, encoding="utf-8")
            store = InMemoryLayoutStore()

            names = [store.find_file(p).name for p in (first, second, third)]

            assert names == ["README", "README<2>", "README<3>"]

    def test_invalid_utf8_is_replaced(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "binary.dat"
            path.write_bytes(b"ok\xff")
            store = InMemoryLayoutStore()

            assert store.find_file(path).text == "ok\ufffd"

    def test_missing_file_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = InMemoryLayoutStore()
            with pytest.raises(FileVisitError) as exc_info:
                store.find_file(Path(tmpdir) / "missing.txt")
            assert "missing.txt" in exc_info.value.context["file_path"]
            assert isinstance(exc_info.value.cause, OSError)
