from __future__ import annotations

from itertools import product

from tabstrip.naming import base_name, resolve_names, unique_name_pair
from tabstrip.options import TabstripOptions

POSIX = TabstripOptions(path_separator="/")


def resolve(*paths: str, options: TabstripOptions = POSIX) -> list[str]:
    names = resolve_names(enumerate(paths, start=1), options)
    return [names[buffer_id] for buffer_id in range(1, len(paths) + 1)]


def test_unique_name_pair_uses_first_differing_parent() -> None:
    assert unique_name_pair("/x/a/file.txt", "/x/b/file.txt", "/") == (
        "a/file.txt",
        "b/file.txt",
    )


def test_unique_name_pair_keeps_exhausted_path_whole() -> None:
    assert unique_name_pair("file.txt", "/src/file.txt", "/") == (
        "file.txt",
        "src/file.txt",
    )


def test_unique_name_pair_identical_paths_stay_equal() -> None:
    first, second = unique_name_pair("/x/a/f.txt", "/x/a/f.txt", "/")

    assert first == second == "/x/a/f.txt"


def test_base_name_for_unnamed_buffers() -> None:
    assert base_name("", 7, POSIX) == "[buffer 7]"
    titled = TabstripOptions(path_separator="/", no_name_title="[No Name]")
    assert base_name("", 7, titled) == "[No Name]"


def test_base_name_truncates_long_leaf() -> None:
    options = TabstripOptions(path_separator="/", maximum_length=8)

    assert base_name("/tmp/abcdefghijkl.py", 1, options) == "abcdefg…"


def test_distinct_basenames_are_left_alone() -> None:
    assert resolve("/x/a.py", "/x/b.py") == ["a.py", "b.py"]


def test_two_buffers_sharing_basename() -> None:
    assert resolve("/x/a/file.txt", "/x/b/file.txt") == ["a/file.txt", "b/file.txt"]


def test_three_buffers_sharing_basename_are_pairwise_distinct() -> None:
    names = resolve("/x/a/f.txt", "/x/b/f.txt", "/x/b/c/f.txt")

    assert len(set(names)) == 3
    assert names[:2] == ["a/f.txt", "b/f.txt"]


def test_cascading_collision_is_widened_again() -> None:
    # The last pair widens to "m/a/f", which the first buffer already holds.
    names = resolve("/m/a/f", "/n/a/f", "/z/m/a/f", "/q/a/f")

    assert len(set(names)) == 4
    assert names == ["/m/a/f", "n/a/f", "z/m/a/f", "q/a/f"]


def test_same_path_twice_keeps_shared_name() -> None:
    assert resolve("/x/a.py", "/x/a.py") == ["a.py", "a.py"]


def test_unnamed_buffers_with_shared_title_keep_title() -> None:
    options = TabstripOptions(path_separator="/", no_name_title="[No Name]")

    assert resolve("", "", options=options) == ["[No Name]", "[No Name]"]


def test_resolution_is_idempotent() -> None:
    paths = ("/x/a/f.txt", "/x/b/f.txt", "/x/b/c/f.txt", "/y/g.txt")

    assert resolve(*paths) == resolve(*paths)


def test_shared_label_is_not_released_while_still_shown() -> None:
    # "/f" is open twice; widening one copy must move both off "f".
    names = resolve("/f", "/f", "/a/m/f", "/b/a/f")

    assert names == ["/f", "/f", "m/f", "f"]


def test_different_paths_never_share_a_label() -> None:
    pool = ("/f", "/a/f", "/b/a/f", "/a/m/f", "/m/f")

    for paths in product(pool, repeat=4):
        names = resolve(*paths)
        for i, j in product(range(len(paths)), repeat=2):
            if paths[i] != paths[j]:
                assert names[i] != names[j], (paths, names)
