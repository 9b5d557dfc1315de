from g11n_catalog.adapters.memory import MemoryAdapter


def test_memory_adapter_reads_written_data() -> None:
    adapter = MemoryAdapter()
    adapter.initialize()
    adapter.write("message", "en", None, {"greeting": "hi", "greeting|formal": "hello"})

    table = adapter.read("message", "en", "default")

    assert table.lookup("greeting").translated == "hi"
    assert table.lookup("greeting", "formal").translated == "hello"


def test_memory_adapter_merges_later_writes() -> None:
    adapter = MemoryAdapter()
    adapter.write("message", "en", "blog", {"greeting": "hi", "apple": ["one", "many"]})
    adapter.write("message", "en", "blog", {"greeting": "hey", "apple": ["an apple"]})

    table = adapter.read("message", "en", "blog")

    assert table.lookup("greeting").translated == "hey"
    assert table.lookup("apple").translated == ("an apple", "many")


def test_memory_adapter_unknown_triple_is_empty() -> None:
    adapter = MemoryAdapter()
    adapter.write("message", "en", None, {"greeting": "hi"})

    assert len(adapter.read("message", "fr")) == 0
    assert len(adapter.read("validation", "en")) == 0


def test_memory_adapter_detaches_written_values() -> None:
    adapter = MemoryAdapter()
    forms = ["one apple", "many apples"]
    plural = {"one": "a pear", "other": "pears"}
    adapter.write("message", "en", None, {"apple": forms, "pear": plural})

    forms.append("mutated")
    plural["other"] = "mutated"
    table = adapter.read("message", "en")

    assert table.lookup("apple").translated == ("one apple", "many apples")
    assert table.lookup("pear").translated == {"one": "a pear", "other": "pears"}
