import pytest

from zebrazpl.errors import ValidationError
from zebrazpl.protocol import commands
from zebrazpl.protocol.command_set import CommandSet


def test_render_in_append_order():
    command_set = (
        CommandSet()
        .append(commands.START_FORMAT)
        .append(commands.FIELD_ORIGIN, {"x": 1, "y": 2})
        .append(commands.FIELD_DATA, {"a": "Hi"})
        .append(commands.FIELD_SEPARATOR)
        .append(commands.END_FORMAT)
    )
    assert len(command_set) == 5
    assert command_set.render_string() == "^XA^FO1,2,^FDHi^FS^XZ"
    assert command_set.render_bytes() == b"^XA^FO1,2,^FDHi^FS^XZ"


def test_invalid_append_leaves_set_unchanged():
    command_set = CommandSet().append(commands.START_FORMAT)
    with pytest.raises(ValidationError):
        command_set.append(commands.PRINT_WIDTH, {"a": 0})
    assert len(command_set) == 1


def test_caller_mutation_does_not_leak():
    values = {"a": "x"}
    command_set = CommandSet().append(commands.FIELD_DATA, values)
    values["a"] = "y"
    assert command_set.render_string() == "^FDx"


def test_render_bytes_with_binary_member():
    payload = bytes(range(256))
    command_set = CommandSet().append(
        commands.DOWNLOAD_OBJECTS,
        {"d": "R", "f": "F", "b": "B", "x": "T", "t": len(payload), "data": payload},
    )
    assert command_set.render_bytes() == b"~DYR:F,B,T,256,," + payload


def test_extend_and_iterate():
    first = CommandSet().append(commands.START_FORMAT)
    second = CommandSet().append(commands.END_FORMAT)
    first.extend(second)
    assert [template for template, _ in first] == [commands.START_FORMAT, commands.END_FORMAT]
    assert first.render_string() == "^XA^XZ"
    assert len(second) == 1


def test_copy_is_independent():
    original = CommandSet().append(commands.START_FORMAT)
    duplicate = original.copy().append(commands.END_FORMAT)
    assert len(original) == 1
    assert len(duplicate) == 2
