from pathlib import Path

import pytest

from fontindex.attributes import Attributes, Style
from fontindex.dynamic import DynamicIndex, FaceSpec
from fontindex.enumerator import FontRecord
from fontindex.exceptions import UnknownSourceError
from fontindex.lookup import FamilyLookup
from fontindex.types import FamilyId, GenericFamily, SourceId


def test_register_family_and_lookup() -> None:
    index = DynamicIndex()
    source = index.register_source(b"embedded-font")
    family = index.register_family(
        "Brand Sans",
        [
            FaceSpec(source=source),
            FaceSpec(source=source, attributes=Attributes(weight=700), index=1, offset=128),
        ],
    )

    entry = index.family_by_name("brand sans")
    assert entry is not None
    assert entry.id == family
    bold = index.query("Brand Sans", Attributes(weight=700))
    assert bold is not None
    assert (bold.index, bold.offset) == (1, 128)
    assert bold.source.data == b"embedded-font"
    assert bold.source.path is None


def test_generic_keys_never_resolve() -> None:
    index = DynamicIndex()
    source = index.register_source(b"data")
    index.register_family("sans-serif", [FaceSpec(source=source)])
    assert index.family_by_key(GenericFamily.SANS_SERIF) is None
    assert index.family_by_key("sans-serif") is not None


def test_family_handles_outlive_lookups() -> None:
    index = DynamicIndex()
    source = index.register_source(b"data")
    family = index.register_family("Handle", [FaceSpec(source=source)])

    handle = index.family_handle(family)
    assert handle is not None
    assert handle.name == "Handle"
    assert handle is index.family_handle(family)
    del index
    assert handle.fonts and handle.id == family


def test_registration_keeps_issued_ids_valid() -> None:
    index = DynamicIndex()
    source = index.register_source(b"data")
    first = index.register_family("First", [FaceSpec(source=source)])
    first_font = index.family_by_id(first).query().id

    italic = FaceSpec(source=source, attributes=Attributes(style=Style.ITALIC))
    index.register_family("Second", [italic])
    again = index.font_by_id(first_font)
    assert again is not None
    assert again.family.name == "First"


def test_unknown_source_leaves_index_untouched() -> None:
    index = DynamicIndex()
    source = index.register_source(b"data")
    with pytest.raises(UnknownSourceError):
        index.register_family("Broken", [FaceSpec(source=source), FaceSpec(source=SourceId(9))])
    assert index.family_by_name("Broken") is None
    assert index.font_count == 0
    assert index.families == ()


def test_lookups_on_unknown_ids_return_none() -> None:
    index = DynamicIndex()
    assert index.family_by_id(FamilyId(0)) is None
    assert index.family_handle(FamilyId(0)) is None
    assert index.family_handle("0") is None  # type: ignore[arg-type]
    assert index.query("Anything") is None


def test_register_records_groups_by_name(tmp_path: Path) -> None:
    font_path = tmp_path / "Demo.ttc"
    font_path.write_bytes(b"ttc")
    records = [
        FontRecord(family="Demo", attributes=Attributes(), source=font_path, index=0),
        FontRecord(family="Other", attributes=Attributes(), source=b"other"),
        FontRecord(family="demo", attributes=Attributes(weight=700), source=font_path, index=1),
    ]
    index = DynamicIndex()
    ids = index.register_records(records)

    assert [index.family_by_id(family).name for family in ids] == ["Demo", "Other"]
    demo = index.family_by_name("DEMO")
    assert demo.font_count == 2
    assert index.source_count == 2


def test_rejected_records_leave_index_untouched() -> None:
    records = [
        FontRecord(family="Good", attributes=Attributes(), source=b"good"),
        FontRecord(family=" ", attributes=Attributes(), source=b"blank"),
    ]
    index = DynamicIndex()
    with pytest.raises(ValueError):
        index.register_records(records)
    assert index.families == ()
    assert index.family_by_name("Good") is None
    assert (index.source_count, index.font_count) == (0, 0)

    negative = [FontRecord(family="Good", attributes=Attributes(), source=b"good", index=-1)]
    with pytest.raises(ValueError):
        index.register_records(negative)
    assert index.source_count == 0


def test_source_lookup_by_id() -> None:
    index = DynamicIndex()
    source = index.register_source(b"data")
    entry = index.source_by_id(source)
    assert entry is not None
    assert entry.data == b"data"
    assert index.source_by_id(SourceId(4)) is None


def test_lookup_base_requires_family_storage() -> None:
    with pytest.raises(TypeError):
        FamilyLookup()  # type: ignore[abstract]

    class Partial(FamilyLookup):
        pass

    with pytest.raises(TypeError):
        Partial()  # type: ignore[abstract]
