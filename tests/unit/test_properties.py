import pytest

from pagecheck.core.errors import PropertyMissing
from pagecheck.core.properties import class_tokens, read_property

from fakes import FakeElement, FakeJSHandle, SVGAnimatedString


@pytest.mark.asyncio
async def test_read_property_walks_nested_path():
    el = FakeElement(extra={"style": {"display": "none"}})
    assert await read_property(el, ["style", "display"]) == "none"
    assert await read_property(el, ["className"]) == ""


@pytest.mark.asyncio
async def test_read_property_reports_missing_intermediate():
    el = FakeElement()
    with pytest.raises(PropertyMissing, match="'dataset' is missing"):
        await read_property(el, ["dataset", "testid"])


@pytest.mark.asyncio
async def test_read_property_reports_full_walked_path():
    handle = FakeJSHandle({"style": {}})
    with pytest.raises(PropertyMissing, match="'style.color' is missing"):
        await read_property(handle, ["style", "color"])


@pytest.mark.asyncio
async def test_read_property_rejects_empty_path():
    with pytest.raises(ValueError):
        await read_property(FakeElement(), [])


def test_class_tokens_splits_class_string():
    assert class_tokens("widget  hidden\n") == ["widget", "hidden"]
    assert class_tokens(None) == []


@pytest.mark.asyncio
async def test_svg_class_name_serializes_empty_but_base_val_reads():
    icon = FakeElement(class_name=SVGAnimatedString("icon active"))
    assert await read_property(icon, ["className"]) == {}
    assert await read_property(icon, ["className", "baseVal"]) == "icon active"
