"""Catalogue of TypeScript diagnostics and their plain-language explanations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence


def pattern_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a diagnostic template such as ``"Cannot find name '{0}'."``.

    Every ``{...}`` placeholder becomes a lazy capture group and the rest of
    the template is matched literally against the whole message.
    """
    parts = ["^"]
    last_end = 0
    i = 0
    while i < len(pattern):
        if pattern[i] == "{":
            parts.append(re.escape(pattern[last_end:i]))
            close = pattern.find("}", i)
            i = len(pattern) if close == -1 else close
            parts.append("(.+?)")
            last_end = i + 1
        i += 1
    if last_end < len(pattern):
        parts.append(re.escape(pattern[last_end:]))
    parts.append(r"\Z")
    return re.compile("".join(parts))


def extract_params(pattern: re.Pattern[str], message: str) -> list[str] | None:
    """Return the placeholder values captured from ``message``, or None if it does not match."""
    match = pattern.search(message)
    if match is None:
        return None
    return [group for group in match.groups() if group is not None]


def substitute_params(template: str, params: Sequence[str]) -> str:
    """Replace ``{0}``, ``{1}``, ... in ``template`` with the given values, in order."""
    result = template
    for index, param in enumerate(params):
        result = result.replace(f"{{{index}}}", param)
    return result


@dataclass(frozen=True)
class ErrorInfo:
    """A compiled diagnostic pattern together with its human-readable template."""

    pattern: re.Pattern[str]
    message: str


_CATALOGUE: tuple[tuple[int, str, str], ...] = (
    # 1000-series: syntax and parsing errors
    (1002, "Unterminated string literal.",
     "You've started a string but haven't ended it."),
    (1003, "Identifier expected.",
     "I was expecting a name but none was provided."),
    (1005, "'{0}' expected.",
     "'{0}' is expected here."),
    (1006, "A file cannot end inside a template literal.",
     "A file cannot end inside a template literal."),
    (1009, "Trailing comma not allowed.",
     "You've added a trailing comma when you're not supposed to."),
    (1014, "A rest parameter must be last in a parameter list.",
     "A parameter that starts with `...` must be the last one in the list."),
    (1015, "Parameter cannot have question mark and initializer.",
     "A parameter cannot use both a question mark and a default value - choose one or the other."),
    (1091, "Only a single variable declaration is allowed in a 'for...in' statement.",
     "You can only create a single variable in a 'for...in' statement."),
    (1109, "Expression expected.",
     "I was expecting some code that gives me a value."),
    (1117, "An object literal cannot have multiple properties with the same name.",
     "You can't add the same property multiple times to an object."),
    (1155, "A 'const' assertions can only be applied to references to enum members, "
           "or string, number, boolean, array, or object literals.",
     "A `const` must be given a value when you declare it."),
    (1163, "A computed property name must be of type '{0}'.",
     "A computed property name must be of type '{0}'."),
    (1208, "'{0}' cannot be compiled under '--isolatedModules' because it is considered a "
           "global script file. Add an import, export, or an empty 'export {}' statement "
           "to make it a module.",
     "'{0}' is being treated as a script, not a module. Add an import, export, or an "
     "empty 'export {{}}' statement to make it a module."),
    (1240, "Unable to resolve signature of class decorator when called as an expression.",
     "I can't resolve the signature of this class decorator."),
    (1254, "A 'const' assertion can only be applied to a string, number, boolean, array, "
           "or object literal.",
     "A 'const' assertion can only be applied to a string, number, boolean, array, "
     "or object literal."),
    (1268, "'await' expressions are only allowed at the top level of a file when that file "
           "is a module, but this file has no imports or exports. Consider adding an empty "
           "'export {}' to make this file a module.",
     "'await' expressions are only allowed at the top level of a file when that file is "
     "a module. Add an empty 'export {{}}' to make this file a module."),
    (1313, "A class may only extend another class.",
     "A class may only extend another class."),
    (1434, "Top-level 'await' expressions are only allowed when the 'module' option is set "
           "to 'es2022', 'esnext', 'system', 'node16', 'nodenext', or 'preserve', and the "
           "'target' option is set to 'es2017' or higher.",
     "You need to enable top-level await in your tsconfig."),
    # 2300-series: name resolution and declarations
    (2304, "Cannot find name '{0}'.",
     "I can't find '{0}' - it might not be imported or defined."),
    (2305, "Module '{0}' has no exported member '{1}'.",
     "'{1}' is not exported "
     "from '{0}'."),
    (2307, "Cannot find module '{0}' or its corresponding type declarations.",
     "This could be one of two things - either '{0}' doesn't exist on your file system, "
     "or I can't find any type declarations for it."),
    (2312, "An interface can only extend an object type or intersection of object types "
           "with statically known members.",
     "An interface can only extend an object type or another interface."),
    (2314, "Generic type '{0}' requires {1} type argument(s).",
     "'{0}' requires {1} type argument(s) - you need to pass them via a generic."),
    (2322, "Type '{0}' is not assignable to type '{1}'.",
     "I was expecting a type matching '{1}' but instead you passed '{0}'."),
    (2324, "Property '{0}' is missing in type '{1}'.",
     "Property '{0}' is missing in type '{1}'."),
    (2326, "Types of property '{0}' are incompatible.",
     "Types of property '{0}' are incompatible."),
    (2327, "Index signature is missing in type '{0}'.",
     "Index signature is missing in type '{0}'."),
    (2339, "Property '{0}' does not exist on type '{1}'.",
     "You're trying to access '{0}' on an object that doesn't contain it."),
    (2344, "Type '{0}' does not satisfy the constraint '{1}'.",
     "Type '{0}' doesn't satisfy the constraint '{1}'."),
    (2345, "Argument of type '{0}' is not assignable to parameter of type '{1}'.",
     "I was expecting '{1}' but you passed '{0}'."),
    (2349, "This expression is not callable.",
     "You're trying to call something that isn't a function."),
    (2352, "Conversion of type '{0}' to type '{1}' may be a mistake because neither type "
           "sufficiently overlaps with the other.",
     "Converting '{0}' to '{1}' may be a mistake - these types don't overlap."),
    (2353, "Object literal may only specify known properties, and '{0}' does not exist "
           "in type '{1}'.",
     "You can't pass property '{0}' to type '{1}'."),
    (2355, "A function whose declared type is neither 'void' nor 'any' must return a value.",
     "This function says it returns something, but it doesn't return anything."),
    (2365, "Operator '{0}' cannot be applied to types '{1}' and '{2}'.",
     "Operator '{0}' cannot be applied to types '{1}' and '{2}'."),
    (2393, "Duplicate function implementation.",
     "You've got a duplicate function implementation."),
    (2414, "Class name cannot be '{0}'.",
     "Class name cannot be '{0}'."),
    (2451, "Cannot redeclare block-scoped variable '{0}'.",
     "'{0}' has already been declared - you can't declare it again."),
    (2488, "Type '{0}' must have a '[Symbol.iterator]()' method that returns an iterator.",
     "Type '{0}' must have a '[Symbol.iterator]()' method to use for-of."),
    (2551, "Property '{0}' does not exist on type '{1}'. Did you mean '{2}'?",
     "You're trying to access '{0}' on an object that doesn't contain it. "
     "Did you mean '{2}'?"),
    (2552, "Cannot find name '{0}'. Did you mean '{1}'?",
     "Cannot find name '{0}'. Did you mean '{1}'?"),
    (2554, "Expected {0} arguments, but got {1}.",
     "This function needs {0} argument(s), but you're passing {1}."),
    (2556, "A spread argument must either have a tuple type or be passed to a rest parameter.",
     "A spread argument must be from a tuple or passed to a rest parameter."),
    (2571, "Object is of type 'unknown'.",
     "I don't know what type this object is, so I've defaulted it to 'unknown'."),
    (2590, "Expression produces a union type that is too complex to represent.",
     "This expression produces a type that's too complex for me to represent."),
    (2604, "JSX element type '{0}' does not have any construct or call signatures.",
     "JSX element type '{0}' doesn't have any construct or call signatures."),
    (2614, "Module '{0}' has no default export.",
     "Module '{0}' has no default export."),
    (2686, "'{0}' refers to a UMD global, but the current file is a module. "
           "Consider adding an import instead.",
     "'{0}' refers to a UMD global, but this file is a module. "
     "Consider adding an import instead."),
    (2722, "Cannot invoke an object which is possibly 'undefined'.",
     "This value might be undefined - check that it exists before using it."),
    (2739, "Type '{0}' is missing the following properties from type '{1}': {2}",
     "'{0}' is missing some required properties from type '{1}': {2}"),
    (2741, "Property '{0}' is missing in type '{1}' but required in type '{2}'.",
     "You haven't passed all the required properties to '{2}' - '{1}' is missing "
     "the '{0}' property."),
    (2749, "'{0}' refers to a value, but is being used as a type here. "
           "Did you mean 'typeof {0}'?",
     "'{0}' is a value, not a type. Did you mean 'typeof {0}'?"),
    (2761, "Type import '{0}' cannot be used as a value because it was exported using "
           "'export type'.",
     "'{0}' is a type-only import and can't be used as a value."),
    (2775, "Assertions require every name in the call target to be declared with an "
           "explicit type annotation.",
     "Assertions require every name to be declared with an explicit type annotation."),
    (2783, "'{0}' is specified more than once, so this usage will be overwritten.",
     "'{0}' is specified more than once - the later value will overwrite earlier ones."),
    # 5000-series
    (5075, "'{0}' is a type and cannot be imported in JavaScript files. "
           "Use '{1}' in a JSDoc type annotation.",
     "'{0}' is a type and can't be imported in JavaScript files."),
    # 6000-series
    (6133, "'{0}' is declared but its value is never read.",
     "'{0}' is declared but never used."),
    (6142, "Module '{0}' was resolved to '{1}', but '--resolveJsonModule' is not used.",
     "Module '{0}' is imported but '--resolveJsonModule' is not enabled in your tsconfig."),
    (6196, "'{0}' is declared but never used.",
     "'{0}' is declared but never used."),
    (6244, "Module '{0}' was resolved to '{1}', but '--jsx' is not set.",
     "Module '{0}' was resolved but '--jsx' is not set in your tsconfig."),
    # 7000-series: strict mode errors
    (7006, "Parameter '{0}' implicitly has an '{1}' type.",
     "I don't know what type '{0}' is supposed to be, so I've defaulted it to '{1}'. "
     "Your tsconfig says I should throw an error here."),
    (7017, "Element implicitly has an 'any' type because type '{0}' has no index signature.",
     "Type '{0}' has no index signature, so element access gives an implicit 'any' type."),
    (7026, "JSX element implicitly has type 'any' because no interface "
           "'JSX.IntrinsicElements' exists.",
     "JSX element has an implicit 'any' type because 'JSX.IntrinsicElements' "
     "doesn't exist."),
    (7053, "Element implicitly has an 'any' type because expression of type '{0}' "
           "can't be used to index type '{1}'.",
     "Expression of type '{0}' can't be used to index type '{1}'."),
    (7057, "'yield' expression implicitly results in an 'any' type because its containing "
           "generator lacks a return-type annotation.",
     "'yield' needs a type annotation on the containing generator."),
    (7061, "A mapped type may not declare properties or methods.",
     "A mapped type may not declare properties or methods."),
    # 8000-series
    (8016, "Type arguments can only be used in TypeScript files.",
     "Type arguments can only be used in TypeScript files."),
    # 17000-series
    (17004, "Cannot use JSX unless the '--jsx' flag is provided.",
     "Add 'jsx' to your tsconfig.json to use JSX."),
    (18004, "No value exists in scope for the shorthand property '{0}'. "
            "Either declare one or provide an initializer.",
     "No value exists for shorthand property '{0}'. "
     "Either declare one or provide an initializer."),
    # 95000-series
    (95050, "Convert function to an async function",
     "Consider converting this function to an async function."),
)

ERRORS: Mapping[int, ErrorInfo] = MappingProxyType(
    {code: ErrorInfo(pattern_to_regex(template), message)
     for code, template, message in _CATALOGUE}
)