"""
Locale tree reconciliation.

Two tree shapes are used across the app:

* *raw data*: a nested mapping of plain strings, as found in an upstream
  locale document, e.g. ``{"en": {"common": {"here": "Here"}}}``.
* *processed data*: the same hierarchy where every leaf is a ``LeafPair``
  holding the original string and its translation (``None`` until someone
  provides one).

Processed trees are modelled as ``LeafPair | Branch``. The JSON form used for
persistence (leaves stored as ``{"_original": ..., "_translated": ...}``) is
only inspected by ``from_processed_data``.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from ol_locale_translations.utils.constants import ORIGINAL_KEY, TRANSLATED_KEY


@dataclass(frozen=True)
class LeafPair:
    """A single translatable string and its translation."""

    original: str
    translated: str | None = None

    @property
    def is_translated(self) -> bool:
        return self.translated is not None


@dataclass(frozen=True)
class Branch:
    """A keyed group of locale nodes."""

    children: Mapping[str, "Node"] = field(default_factory=dict)

    def __contains__(self, key: str) -> bool:
        return key in self.children

    def __iter__(self):
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def get(self, key: str, default: "Node | None" = None) -> "Node | None":
        return self.children.get(key, default)

    def items(self):
        return self.children.items()


Node = LeafPair | Branch


class MergeResult(NamedTuple):
    merged_tree: Branch
    new_untranslated_count: int


class Statistics(NamedTuple):
    translated_count: int
    overall_count: int


class UntranslatedKey(NamedTuple):
    leaf: LeafPair
    path: tuple[str, ...]


EMPTY_BRANCH = Branch()


# ============================================================================
# Conversion helpers
# ============================================================================


def _raw_scalar_to_str(value: Any) -> str:
    """Coerce a raw leaf value (as decoded from YAML) to a string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _raw_key_to_str(key: Any) -> str:
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


def _raw_children(value: Any) -> Mapping[str, Any] | None:
    """Return the keyed children of a raw container, ``None`` for a leaf."""
    if isinstance(value, Mapping):
        return {_raw_key_to_str(key): child for key, child in value.items()}
    if isinstance(value, list | tuple):
        return {str(index): child for index, child in enumerate(value)}
    return None


def from_raw_data(data: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Normalize a decoded raw document into nested ``dict``s of strings.

    Keys are stringified, sequences become index-keyed mappings and scalar
    leaves are coerced to strings (``None`` becomes ``""``).
    """
    normalized = {}
    for key, value in (_raw_children(data) or {}).items():
        children = _raw_children(value)
        normalized[key] = (
            _raw_scalar_to_str(value) if children is None else from_raw_data(children)
        )
    return normalized


def from_processed_data(data: Mapping[str, Any] | None) -> Branch:
    """
    Build a processed tree from its persisted JSON form.

    Args:
        data (dict): Processed data where leaves are
            ``{"_original": str, "_translated": str | None}``

    Returns:
        Branch: The root of the processed tree

    Raises:
        TypeError: If a node is neither a leaf record nor an object
    """
    children = {}
    for key, value in (data or {}).items():
        if not isinstance(value, Mapping):
            msg = f"Malformed processed data at key {key!r}: {value!r}"
            raise TypeError(msg)
        if ORIGINAL_KEY in value or TRANSLATED_KEY in value:
            children[key] = LeafPair(
                original=value.get(ORIGINAL_KEY) or "",
                translated=value.get(TRANSLATED_KEY),
            )
        else:
            children[key] = from_processed_data(value)
    return Branch(children)


def to_processed_data(tree: Branch | None) -> dict[str, Any]:
    """Return the persisted JSON form of a processed tree."""
    processed_data = {}
    for key, child in (tree or EMPTY_BRANCH).items():
        if isinstance(child, LeafPair):
            processed_data[key] = {
                ORIGINAL_KEY: child.original,
                TRANSLATED_KEY: child.translated,
            }
        else:
            processed_data[key] = to_processed_data(child)
    return processed_data


# ============================================================================
# Reconciliation
# ============================================================================


def _merge_branch(existing: Branch, fresh: Mapping[str, Any]) -> MergeResult:
    children = {}
    new_untranslated_count = 0
    for key, fresh_value in fresh.items():
        existing_child = existing.get(key)
        fresh_children = _raw_children(fresh_value)
        if fresh_children is not None:
            if not isinstance(existing_child, Branch):
                existing_child = EMPTY_BRANCH
            children[key], branch_count = _merge_branch(existing_child, fresh_children)
            new_untranslated_count += branch_count
            continue

        original = _raw_scalar_to_str(fresh_value)
        if original == "":
            # Empty strings never need translating.
            translated = ""
        elif isinstance(existing_child, LeafPair):
            translated = existing_child.translated
        else:
            translated = None
        if translated is None:
            new_untranslated_count += 1
        children[key] = LeafPair(original=original, translated=translated)
    return MergeResult(Branch(children), new_untranslated_count)


def merge(existing: Node | None, fresh: Mapping[str, Any] | None) -> MergeResult:
    """
    Build a new processed tree from the raw *fresh* data.

    Translations are carried over from the processed *existing* tree where a
    leaf exists at the same key path. The result contains exactly the keys of
    *fresh*; neither input is modified.

    Args:
        existing (Branch): The current processed tree (``None`` or a single
            leaf count as an empty tree)
        fresh (dict): The freshly fetched raw data

    Returns:
        MergeResult: The merged tree and the number of its leaves that still
            need a translation (empty strings excluded)
    """
    if not isinstance(existing, Branch):
        existing = EMPTY_BRANCH
    return _merge_branch(existing, _raw_children(fresh) or {})


def statistics(tree: Node | None) -> Statistics:
    """
    Count translated leaves as well as all countable leaves of a tree.

    Leaves with an empty original are auto-resolved and are not counted.
    """
    if tree is None:
        return Statistics(0, 0)
    if isinstance(tree, LeafPair):
        if tree.original == "":
            return Statistics(0, 0)
        return Statistics(int(tree.is_translated), 1)

    translated_count = overall_count = 0
    for child in tree.children.values():
        child_statistics = statistics(child)
        translated_count += child_statistics.translated_count
        overall_count += child_statistics.overall_count
    return Statistics(translated_count, overall_count)


def unused_translated_keys_count(existing: Node | None, merged: Node | None) -> int:
    """
    Count the translated leaves of *existing* that are missing from *merged*.

    A whole subtree may have been removed upstream, in which case all of its
    translated leaves are counted at once.
    """
    if existing is None:
        return 0
    if isinstance(existing, LeafPair):
        if isinstance(merged, LeafPair):
            return 0
        return statistics(existing).translated_count
    if not isinstance(merged, Branch):
        return statistics(existing).translated_count

    unused_count = 0
    for key, child in existing.items():
        if key in merged:
            unused_count += unused_translated_keys_count(child, merged.get(key))
        else:
            unused_count += statistics(child).translated_count
    return unused_count


def to_raw(tree: Node | None) -> Any:
    """
    Return the raw representation of a processed tree.

    Untranslated leaves become ``None``.
    """
    if tree is None:
        return {}
    if isinstance(tree, LeafPair):
        return tree.translated
    return {key: to_raw(child) for key, child in tree.items()}


def _iter_leaves(
    tree: Node | None, path: tuple[str, ...] = ()
) -> Iterator[tuple[LeafPair, tuple[str, ...]]]:
    if tree is None:
        return
    if isinstance(tree, LeafPair):
        yield tree, path
        return
    for key, child in tree.items():
        yield from _iter_leaves(child, (*path, key))


def untranslated_keys(tree: Node | None) -> Iterator[UntranslatedKey]:
    """
    Yield the leaves that haven't been translated yet, in depth-first order.

    Each item carries the leaf and the keys leading to it from the root.
    Every call starts a new traversal.
    """
    for leaf, path in _iter_leaves(tree):
        if not leaf.is_translated:
            yield UntranslatedKey(leaf, path)


def next_untranslated_key(
    tree: Node | None, after: tuple[str, ...] | None = None
) -> UntranslatedKey | None:
    """
    Return the first untranslated key located after the *after* path.

    The *after* leaf doesn't need to be untranslated itself. Wraps around to
    the first untranslated key when nothing follows, and returns ``None``
    when every leaf is translated.
    """
    after = tuple(after) if after is not None else None
    first = None
    passed = after is None
    for leaf, path in _iter_leaves(tree):
        if not leaf.is_translated:
            if passed:
                return UntranslatedKey(leaf, path)
            if first is None:
                first = UntranslatedKey(leaf, path)
        if path == after:
            passed = True
    return first
