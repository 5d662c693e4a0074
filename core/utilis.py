import copy
import re


def strtr(template, replacements):
    """
    Replace every key of `replacements` found in `template` in a single pass.
    Longer keys win over shorter ones, replaced text is never scanned again and
    unknown placeholders are left as they are.
    """
    keys = [key for key in replacements if key]
    if not keys:
        return template
    keys.sort(key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: str(replacements[match.group(0)]), template)


def merge_config(*configs):
    """
    Recursively merge option dicts. Later values win; nested dicts are merged
    key by key. None of the inputs is modified.
    """
    merged = {}
    for config in configs:
        if not config:
            continue
        for key, value in config.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = merge_config(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
    return merged


def merge_css_classes(*classes):
    seen = []
    for chunk in classes:
        if not chunk:
            continue
        for name in str(chunk).split():
            if name not in seen:
                seen.append(name)
    return " ".join(seen)


def add_css_class(options, css_class):
    """Append `css_class` to `options["class"]` in place."""
    if not css_class or not str(css_class).strip():
        return options
    options["class"] = merge_css_classes(options.get("class"), css_class)
    return options


def remove_option(options, key, default=None):
    return options.pop(key, default)
