"""Command-line analysis against a list of option definitions, and its report."""

from __future__ import annotations

import sys
from typing import Sequence

from .options import (
    DEFAULTING_KINDS,
    DOUBLE_KINDS,
    INT_KINDS,
    IPADDR_KINDS,
    RANGE_KINDS,
    SET_KINDS,
    STRING_KINDS,
    ArgOption,
    ArgsError,
    ExtArgsType,
    is_strict_double,
    is_strict_int,
    is_valid_ipv4,
    ipv4_to_int,
)

__all__ = ["parse_args", "format_table", "demo_options", "main"]


def _g(value: float) -> str:
    return f"{value:g}"


def _fixed6(value: float) -> str:
    return f"{value:.6f}"


def _describe(opt: ArgOption) -> str:
    """Type description used when an option lacks its extra argument."""
    kind = opt.kind
    if kind in INT_KINDS:
        text = "int, "
        if kind in RANGE_KINDS:
            text += "范围" + opt.range_text()
        else:
            text += " 可取值[" + opt.range_text() + "]"
        if kind in DEFAULTING_KINDS:
            text += f" 缺省:{opt.default}"
        return text + ")"
    if kind in DOUBLE_KINDS:
        text = "double, "
        if kind in RANGE_KINDS:
            text += "范围" + opt.range_text_double()
        else:
            text += " 可取值[" + opt.range_text_double() + "]"
        if kind in DEFAULTING_KINDS:
            text += " 缺省:" + _g(opt.default)
        return text + ")"
    if kind in STRING_KINDS:
        text = "string"
        if kind in SET_KINDS:
            text += ", 可取值[" + opt.range_text() + "]"
        if kind is ExtArgsType.STR_WITH_SET_DEFAULT or (
            kind is ExtArgsType.STR and opt.default
        ):
            text += " 缺省:" + opt.default
        return text + ")"
    text = "IP地址"
    if kind is ExtArgsType.IPADDR_WITH_DEFAULT:
        text += " 缺省:" + str(opt.value)
    return text + ")"


def _apply_int_range(opt: ArgOption, name: str, text: str) -> None:
    strict = opt.kind is ExtArgsType.INT_WITH_ERROR
    if not is_strict_int(text):
        suffix = "" if strict else f" 缺省:{opt.default}"
        raise ArgsError(
            f"参数[{name}]的附加参数不是整数. (类型:int, 范围{opt.range_text()}{suffix})"
        )
    value = int(text)
    if opt.minimum <= value <= opt.maximum:
        opt.value = value
    elif strict:
        raise ArgsError(
            f"参数[{name}]的附加参数值({value})非法. (类型:int, 范围{opt.range_text()})"
        )
    else:
        opt.value = opt.default


def _apply_int_set(opt: ArgOption, name: str, text: str) -> None:
    strict = opt.kind is ExtArgsType.INT_WITH_SET_ERROR
    if not is_strict_int(text):
        if strict:
            raise ArgsError(
                f"参数[{name}]的附加参数不是整数. (类型:int, 范围[{opt.range_text()}])"
            )
        raise ArgsError(
            f"参数[{name}]的附加参数不是整数. "
            f"(类型:int, 范围{opt.range_text()} 缺省:{opt.default})"
        )
    value = int(text)
    if value in opt.choices:
        opt.value = value
    elif strict:
        raise ArgsError(
            f"参数[{name}]的附加参数值({value})非法. (类型:int, 可取值[{opt.range_text()}])"
        )
    else:
        opt.value = opt.default


def _apply_double_range(opt: ArgOption, name: str, text: str) -> None:
    strict = opt.kind is ExtArgsType.DOUBLE_WITH_ERROR
    if not is_strict_double(text):
        if strict:
            raise ArgsError(
                f"参数[{name}]的附加参数不是浮点数. "
                f"(类型:double, 范围{opt.range_text_double()})"
            )
        raise ArgsError(
            f"参数[{name}]的附加参数不是浮点数. "
            f"(类型:double, 范围{opt.range_text()} 缺省:{_g(opt.default)})"
        )
    value = float(text)
    if opt.minimum <= value <= opt.maximum:
        opt.value = value
    elif strict:
        raise ArgsError(
            f"参数[{name}]的附加参数值({_g(value)})非法. "
            f"(类型:double, 范围{opt.range_text_double()})"
        )
    else:
        opt.value = opt.default


def _apply_double_set(opt: ArgOption, name: str, text: str) -> None:
    strict = opt.kind is ExtArgsType.DOUBLE_WITH_SET_ERROR
    if not is_strict_double(text):
        if strict:
            raise ArgsError(
                f"参数[{name}]的附加参数值({text})非法. "
                f"(类型:double, 可取值[{opt.range_text()}])"
            )
        raise ArgsError(
            f"参数[{name}]的附加参数不是浮点数. "
            f"(类型:double, 范围[{opt.range_text_double()}])"
        )
    value = float(text)
    if value in opt.choices:
        opt.value = value
    elif strict:
        raise ArgsError(
            f"参数[{name}]的附加参数值({_g(value)})非法. "
            f"(类型:double, 可取值[{opt.range_text()}])"
        )
    else:
        opt.value = opt.default


def _apply_string_set(opt: ArgOption, name: str, text: str) -> None:
    if text in opt.choices:
        opt.value = text
    elif opt.kind is ExtArgsType.STR_WITH_SET_ERROR:
        raise ArgsError(
            f"参数[{name}]的附加参数值({text})非法. (类型:string, 可取值[{opt.range_text()}])"
        )
    else:
        opt.value = opt.default


def _apply_ipaddr(opt: ArgOption, name: str, text: str) -> None:
    if is_valid_ipv4(text):
        opt.value = text
        opt.ip_value = ipv4_to_int(text)
    elif opt.kind is ExtArgsType.IPADDR_WITH_ERROR:
        raise ArgsError(f"参数[{name}]的附加参数值({text})非法. (类型:IP地址)")
    else:
        opt.value = opt.default


def _apply(opt: ArgOption, name: str, text: str) -> None:
    kind = opt.kind
    if kind in INT_KINDS:
        (_apply_int_set if kind in SET_KINDS else _apply_int_range)(opt, name, text)
    elif kind in DOUBLE_KINDS:
        (_apply_double_set if kind in SET_KINDS else _apply_double_range)(opt, name, text)
    elif kind is ExtArgsType.STR:
        opt.value = text
    elif kind in STRING_KINDS:
        _apply_string_set(opt, name, text)
    elif kind in IPADDR_KINDS:
        _apply_ipaddr(opt, name, text)


def parse_args(
    argv: Sequence[str], options: Sequence[ArgOption], follow_up_args: bool = False
) -> int:
    """Parse argv (program name first) into options, updating them in place.

    Returns the index of the first argument not consumed as an option.
    Raises ArgsError with a message describing the first problem found.
    """
    by_name = {opt.name: opt for opt in options}
    i = 1
    while i < len(argv):
        current = argv[i]
        if not current.startswith("--"):
            if follow_up_args:
                return i
            raise ArgsError(f"参数[{current}]格式非法(不是--开头的有效内容).")
        opt = by_name.get(current)
        if opt is None:
            raise ArgsError(f"参数[{current}]非法.")
        following = argv[i + 1] if i + 1 < len(argv) else ""
        is_bool = opt.kind is ExtArgsType.BOOLEAN
        if following in by_name and not is_bool:
            raise ArgsError(f"参数[{current}]缺少附加参数. (类型:{_describe(opt)}")
        if opt.existed:
            raise ArgsError(f"参数[{current}]重复.")
        if is_bool:
            opt.existed = True
            opt.value = True
            i += 1
            continue
        if i + 1 >= len(argv):
            raise ArgsError(f"参数[{current}]的附加参数不足. (类型:{_describe(opt)}")
        opt.existed = True
        _apply(opt, current, following)
        i += 2
    return i


def _default_text(opt: ArgOption) -> str:
    kind = opt.kind
    if kind is ExtArgsType.BOOLEAN:
        return "true" if opt.default else "false"
    if kind in DEFAULTING_KINDS:
        return _fixed6(opt.default) if kind in DOUBLE_KINDS else str(opt.default)
    if kind is ExtArgsType.STR:
        return opt.default or "/"
    return "/"


def _value_text(opt: ArgOption) -> str:
    if not opt.existed:
        return "/"
    if opt.kind is ExtArgsType.BOOLEAN:
        return "true"
    if opt.kind in DOUBLE_KINDS:
        return _fixed6(opt.value)
    return str(opt.value)


def format_table(options: Sequence[ArgOption]) -> str:
    """Render the options, their defaults, presence, values and ranges as a table."""

    def measured(opt: ArgOption) -> str:
        if opt.kind in DOUBLE_KINDS:
            return _fixed6(opt.default)
        if opt.kind is ExtArgsType.BOOLEAN:
            return ""
        return str(opt.default)

    def measured_value(opt: ArgOption) -> str:
        if opt.kind is ExtArgsType.BOOLEAN:
            return ""
        return _fixed6(opt.value) if opt.kind in DOUBLE_KINDS else str(opt.value)

    w1 = max([4, *(len(o.name) for o in options)]) + 1
    w2 = max([4, *(len(o.type_name()) for o in options)]) + 1
    w3 = max([7, *(len(measured(o)) for o in options)]) + 1
    w4 = 7
    w5 = max([5, *(len(measured_value(o)) for o in options if o.existed)]) + 1
    w6 = max([9, *(len(o.range_text()) for o in options)]) + 2
    widths = (w1, w2, w3, w4, w5, w6)
    ruler = "=" * sum(widths)

    def row(cells: Sequence[str]) -> str:
        return " " + "".join(cell.ljust(w) for cell, w in zip(cells, widths))

    lines = [ruler, row(("name", "type", "default", "exists", "value", "range/set")), ruler]
    for opt in options:
        lines.append(
            row(
                (
                    opt.name,
                    opt.type_name(),
                    _default_text(opt),
                    str(int(opt.existed)),
                    _value_text(opt),
                    opt.range_text(),
                )
            )
        )
    lines.append(ruler)
    return "\n".join(lines) + "\n\n"


def demo_options() -> list[ArgOption]:
    """A fresh set of sample options covering every kind."""
    hashtypes = ("md5", "sha1", "sha224", "sha256", "sha384", "sha512", "all")
    intset = (11, 22, 33, 123, 345)
    doubleset = (1.1, 2.2, 3.3, 12.3, 3.45)
    return [
        ArgOption.boolean("--help", False),
        ArgOption.boolean("--bool", True),
        ArgOption.int_range("--intdef", 12345, 0, 65535),
        ArgOption.int_range("--interr", 12345, 0, 65535, strict=True),
        ArgOption.int_set("--intsetdef", intset, 2),
        ArgOption.int_set("--intseterr", intset, 2, strict=True),
        ArgOption.double_range("--doubledef", 1.23, -2.5, 99.9),
        ArgOption.double_range("--doubleerr", 1.23, -2.5, 99.9, strict=True),
        ArgOption.double_set("--doublesetdef", doubleset, 2),
        ArgOption.double_set("--doubleseterr", doubleset, 2, strict=True),
        ArgOption.string("--str1", ""),
        ArgOption.string("--str2", "Hello"),
        ArgOption.string_set("--strsetdef", hashtypes, 3),
        ArgOption.string_set("--strseterr", hashtypes, 3, strict=True),
        ArgOption.ipaddr("--ipdef", "192.168.80.230"),
        ArgOption.ipaddr("--iperr", "", strict=True),
    ]


def _value_report(options: Sequence[ArgOption]) -> str:
    w1, w2, w3, w4 = 16, 24, 20, 20
    ruler = "=" * (w1 + w2 + w3 + w4)
    lines = [
        ruler,
        "参数名".ljust(w1) + "参数是否出现在命令行中".ljust(w2) + "值1".ljust(w3) + "值2".ljust(w4),
        ruler,
    ]
    for opt in options:
        if opt.name == "--help":
            continue
        head = opt.name.ljust(w1) + str(int(opt.existed)).ljust(w2)
        if opt.kind is ExtArgsType.BOOLEAN:
            lines.append(head + ("True" if opt.existed else "False"))
        elif opt.kind in DOUBLE_KINDS:
            lines.append(head + _g(opt.value).ljust(w3))
        elif opt.kind in IPADDR_KINDS:
            lines.append(head + f"{opt.ip_value:x}".ljust(w3) + opt.str_ipaddr().ljust(w4))
        elif opt.kind is ExtArgsType.STR and not opt.value:
            lines.append(head + "<NULL>".ljust(w3))
        else:
            lines.append(head + str(opt.value).ljust(w3))
    lines.append(ruler)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the sample options from argv and print the results."""
    if argv is None:
        argv = sys.argv
    options = demo_options()
    try:
        parse_args(argv, options, False)
    except ArgsError as exc:
        print(exc)
        return 1
    print()
    print("请认真观察打印输出中，对应项的exist是否为1，值是否为预期")
    print()
    print("查看default与error区别的方法：")
    print("  给出不在指定范围内的值，会看出差别")
    print("  例：--intdef 100000")
    print("      --interr 100000")
    print()
    print(format_table(options), end="")
    print(_value_report(options))
    return 0


if __name__ == "__main__":
    sys.exit(main())