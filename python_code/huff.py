from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np

from jpeg_common import MAX_CODE_LENGTH, TableClass
from jpeg_errors import CorruptTableError


@dataclass(frozen=True)
class HuffLeaf:
    value: int

    def is_leaf(self):
        return True

    def get_value(self):
        return self.value


@dataclass(frozen=True)
class HuffTree:
    """Internal node of a decode tree. ``left`` is bit 0, ``right`` is bit 1.

    A branch is None when no symbol is coded below it (an unused code).
    """
    left: Optional[Union["HuffTree", HuffLeaf]] = None
    right: Optional[Union["HuffTree", HuffLeaf]] = None

    def is_leaf(self):
        return False

    def get_kid(self, which):
        return self.right if which else self.left

    def get_kids(self):
        return [kid for kid in (self.left, self.right) if kid is not None]

    def get_lookup_table(self, curr_decoded_val=""):
        ret_lookup_table = {}
        for i in [0, 1]:
            kid = self.get_kid(i)
            if kid is None:
                continue
            code = curr_decoded_val + str(i)
            if kid.is_leaf():
                ret_lookup_table[code] = kid.get_value()
            else:
                ret_lookup_table = {**ret_lookup_table, **kid.get_lookup_table(code)}
        return ret_lookup_table

    def get_codes(self):
        # canonical order: shorter codes first, then numerically
        return sorted(self.get_lookup_table().items(), key=lambda item: (len(item[0]), item[0]))

    def decode(self, bits):
        huff_tree = self
        for bit in bits:
            huff_tree = huff_tree.get_kid(int(bit))
            if huff_tree is None:
                raise CorruptTableError("bit sequence hits an unused huffman code")
            if huff_tree.is_leaf():
                return huff_tree.get_value()
        raise CorruptTableError("bit sequence ended inside the huffman tree")

    def to_code_lengths(self):
        tree_level_nodes = [self]
        symbols_of_length = [0] * MAX_CODE_LENGTH
        symbols_list = []

        def advance_tree_level(tree_level):
            return [succ for n in tree_level if not n.is_leaf() for succ in n.get_kids()]

        for current_level in range(MAX_CODE_LENGTH):
            tree_level_nodes = advance_tree_level(tree_level_nodes)
            leaves = [n for n in tree_level_nodes if n.is_leaf()]
            symbols_of_length[current_level] = len(leaves)
            symbols_list.extend(leaf.get_value() for leaf in leaves)

        return tuple(symbols_of_length), tuple(symbols_list)

    def to_nested_list(self):
        def convert(node):
            if node is None:
                return None
            if node.is_leaf():
                return node.get_value()
            return [convert(node.left), convert(node.right)]

        return convert(self)


def kraft_sum(code_lengths):
    """Code space used by the histogram, in units of 2**-16."""
    weights = np.left_shift(1, np.arange(MAX_CODE_LENGTH - 1, -1, -1, dtype=np.int64))
    return int(np.dot(np.asarray(code_lengths, dtype=np.int64), weights))


def canonical_code_table(code_lengths):
    """HUFFSIZE and HUFFCODE as generated by JPEG Annex C (figures C.1 and C.2)."""
    huff_size = np.repeat(np.arange(1, MAX_CODE_LENGTH + 1, dtype=np.uint8),
                          np.asarray(code_lengths, dtype=np.int64))
    huff_code = np.zeros(len(huff_size), dtype=np.uint16)

    code = 0
    si = int(huff_size[0]) if len(huff_size) else 0
    for k in range(len(huff_size)):
        while huff_size[k] != si:
            code <<= 1
            si += 1
        huff_code[k] = code
        code += 1

    return huff_size, huff_code


def generate_huff_tree(code_lengths, values):
    """Build the canonical decode tree for a BITS/HUFFVAL pair.

    Slots are plain indices. Each level expands the open slots left over from
    the level above into two children, then hands out leaves left to right.
    """
    kids = {}
    leaves = {}
    next_slot = 1
    nodes_to_develop = [0]
    symbol_idx = 0

    for tree_level in range(MAX_CODE_LENGTH):
        if symbol_idx == len(values):
            break

        # slots past the first `remaining` can never receive a symbol
        remaining = len(values) - symbol_idx
        level_slots = []
        for parent in nodes_to_develop[:remaining]:
            kids[parent] = (next_slot, next_slot + 1)
            level_slots += [next_slot, next_slot + 1]
            next_slot += 2

        num_values = code_lengths[tree_level]
        for n_val in range(num_values):
            leaves[level_slots[n_val]] = values[symbol_idx + n_val]
        symbol_idx += num_values

        nodes_to_develop = level_slots[num_values:]

    assert symbol_idx == len(values)

    def freeze(slot):
        if slot in leaves:
            return HuffLeaf(leaves[slot])
        if slot not in kids:
            return None
        left, right = (freeze(kid) for kid in kids[slot])
        if left is None and right is None:
            return None
        return HuffTree(left, right)

    return freeze(0) or HuffTree()


@dataclass(frozen=True)
class HuffTable:
    """One table definition from a DHT segment."""
    table_class: TableClass
    id: int
    byte_offset: int
    code_lengths: Tuple[int, ...]
    values: Tuple[int, ...]
    tree: Optional[HuffTree] = None

    @property
    def code_length_sum(self):
        return sum(self.code_lengths)

    @property
    def segment_byte_length(self):
        return 1 + MAX_CODE_LENGTH + self.code_length_sum

    def get_is_dc(self):
        return self.table_class is TableClass.DC

    def get_table_id(self):
        return self.id

    def get_tree(self):
        return self.tree

    def get_code_table(self):
        return canonical_code_table(self.code_lengths)

    def to_dict(self):
        return {
            "tableClass": self.table_class.name,
            "id": self.id,
            "byteOffset": self.byte_offset,
            "segmentByteLength": self.segment_byte_length,
            "codeLengths": list(self.code_lengths),
            "codeLengthSum": self.code_length_sum,
            "values": list(self.values),
            "tree": self.tree.to_nested_list() if self.tree is not None else None,
        }
