import pytest

from snippetsls.snippets.store import SnippetStore, SnippetStoreError


def test_bundled_store_loads():
    """The shipped snippets.toml parses into a non-empty store."""
    store = SnippetStore.bundled()

    assert len(store) > 0
    assert store.get("javascript")["clo"] == "console.log('$1:', $1)"
    assert store.get("ruby")["pry"] == "binding.pry"


def test_from_toml():
    store = SnippetStore.from_toml(
        """
[ruby]
pry = "binding.pry"

[javascript]
clo = "console.log('$1:', $1)"
"""
    )

    assert store.table() == {
        "ruby": {"pry": "binding.pry"},
        "javascript": {"clo": "console.log('$1:', $1)"},
    }
    assert sorted(store.languages()) == ["javascript", "ruby"]


def test_from_toml_invalid_syntax():
    with pytest.raises(SnippetStoreError):
        SnippetStore.from_toml("[ruby\npry = ")


@pytest.mark.parametrize(
    "text",
    [
        'ruby = "binding.pry"',  # language is not a table
        "[ruby]\npry = 1",  # body is not a string
        "[ruby.pry]\nbody = 'binding.pry'",  # three levels deep
    ],
)
def test_from_toml_wrong_shape(text):
    with pytest.raises(SnippetStoreError):
        SnippetStore.from_toml(text)


def test_table_returns_independent_copy():
    """Mutating a returned table never affects the store."""
    store = SnippetStore({"ruby": {"pry": "binding.pry"}})

    table = store.table()
    table["ruby"]["pry"] = "changed"
    table["python"] = {"pdb": "breakpoint()"}

    assert store.table() == {"ruby": {"pry": "binding.pry"}}


def test_store_is_not_affected_by_source_mapping():
    source = {"ruby": {"pry": "binding.pry"}}
    store = SnippetStore(source)

    source["ruby"]["pry"] = "changed"

    assert store.get("ruby")["pry"] == "binding.pry"


def test_store_data_is_read_only():
    store = SnippetStore({"ruby": {"pry": "binding.pry"}})

    with pytest.raises(TypeError):
        store.get("ruby")["pry"] = "changed"  # type: ignore[index]
