"""Canonical DNDML writer used by the round-trip tests."""

from dndml.core import ir


def _int(value: int | None) -> str:
    return "NULL" if value is None else str(value)


def _str(value: str | None) -> str:
    return "NULL" if value is None else f'"{value}"'


def _item(item: ir.ItemValue) -> str:
    return f"%item[val: {_str(item.value)}; qty: {_int(item.qty)}; weight: {_int(item.weight)}]"


def write_value(value: ir.FieldValue) -> str:
    if isinstance(value, ir.StatValue):
        return f"%stat[ability: {_int(value.ability)}; mod: {_int(value.mod)}]"
    if isinstance(value, ir.StringValue):
        return f"%string[{_str(value.value)}]"
    if isinstance(value, ir.IntValue):
        return f"%int[{_int(value.value)}]"
    if isinstance(value, ir.DiceValue):
        return f"%dice[{_int(value.count)}d{_int(value.faces)}+{_int(value.modifier)}]"
    if isinstance(value, ir.DeathSaveValue):
        return f"%deathsaves[succ: {_int(value.succ)}; fail: {_int(value.fail)}]"
    if isinstance(value, ir.ItemValue):
        return _item(value)
    items = "".join(f"\n    {_item(item)};" for item in value.items)
    return f"%itemlist[{items}\n  ]" if items else "%itemlist[]"


def write_sheet(sheet: ir.CharSheet) -> str:
    """Serialize a CharSheet back to DNDML text."""
    out: list[str] = []
    for section in sheet.sections:
        out.append(f"@section {section.identifier}:")
        for field in section.fields:
            out.append(f"  @field {field.identifier}: {write_value(field.value)};")
        out.append("@end-section")
        out.append("")
    return "\n".join(out)
