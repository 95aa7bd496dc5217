import pytest

from ziesha.hashing import sha3_hash
from ziesha.merkle import MerkleTree, merge_hash


def _leaves(values):
    return [sha3_hash(bytes([i])) for i in values]


def test_merkle_proof():
    tree = MerkleTree(_leaves(range(10)))
    root = tree.root()
    for i in range(10):
        curr = sha3_hash(bytes([i]))
        for entry in tree.prove(i):
            curr = merge_hash(curr, entry)
        assert curr == root


@pytest.mark.parametrize("count", [1, 2, 3, 5, 7, 8, 16])
def test_proofs_for_various_sizes(count):
    tree = MerkleTree(_leaves(range(count)))
    for i in range(count):
        curr = sha3_hash(bytes([i]))
        for entry in tree.prove(i):
            curr = merge_hash(curr, entry)
        assert curr == tree.root()


def test_calculation_empty():
    assert MerkleTree([]).root() == bytes(32)


def test_calculation_single():
    assert MerkleTree(_leaves([1])).root() == bytes(
        [
            39, 103, 241, 92, 138, 242, 242, 199, 34, 93, 82, 115, 253, 214, 131, 237,
            199, 20, 17, 10, 152, 125, 16, 84, 105, 124, 52, 138, 237, 78, 108, 199,
        ]
    )


def test_calculation_two():
    assert MerkleTree(_leaves(range(2, 4))).root() == bytes(
        [
            147, 148, 62, 236, 12, 170, 57, 157, 174, 243, 124, 220, 81, 74, 187, 99,
            252, 243, 77, 85, 3, 93, 223, 166, 184, 93, 190, 149, 217, 73, 107, 7,
        ]
    )


def test_calculation_ten():
    assert MerkleTree(_leaves(range(10))).root() == bytes(
        [
            170, 152, 247, 242, 8, 76, 139, 70, 132, 168, 19, 116, 29, 8, 9, 42,
            0, 85, 164, 237, 192, 106, 123, 174, 180, 217, 32, 126, 18, 38, 210, 79,
        ]
    )


def test_calculation_sixteen():
    assert MerkleTree(_leaves(range(16))).root() == bytes(
        [
            205, 127, 119, 130, 101, 244, 191, 81, 239, 175, 89, 0, 91, 183, 65, 61,
            170, 6, 253, 155, 249, 90, 186, 20, 71, 105, 83, 24, 118, 68, 70, 119,
        ]
    )


def test_merge_hash_is_symmetric():
    a, b = _leaves([4, 5])
    assert merge_hash(a, b) == merge_hash(b, a)


def test_shape():
    tree = MerkleTree(_leaves(range(10)))
    assert tree.num_leaves() == 10
    assert tree.depth() == 4
    assert MerkleTree(_leaves([0])).depth() == 0
    assert MerkleTree([]).num_leaves() == 1


def test_prove_out_of_range():
    tree = MerkleTree(_leaves(range(3)))
    with pytest.raises(IndexError):
        tree.prove(3)