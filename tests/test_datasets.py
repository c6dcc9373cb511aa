import pytest

from ann221 import UnknownDatasetError, available_datasets, get_dataset


def test_and_is_the_default_gate() -> None:
    training_set = get_dataset()
    assert [float(v) for v in training_set.inputs1] == [0.0, 1.0, 0.0, 1.0]
    assert [float(v) for v in training_set.inputs2] == [0.0, 0.0, 1.0, 1.0]
    assert [float(v) for v in training_set.targets] == [0.0, 0.0, 0.0, 1.0]


@pytest.mark.parametrize(
    "name, rule",
    [
        ("and", lambda a, b: a and b),
        ("or", lambda a, b: a or b),
        ("nand", lambda a, b: not (a and b)),
        ("nor", lambda a, b: not (a or b)),
        ("xor", lambda a, b: a != b),
    ],
)
def test_gate_targets_follow_truth_table(name, rule) -> None:
    for sample in get_dataset(name):
        expected = float(bool(rule(bool(sample.input1), bool(sample.input2))))
        assert float(sample.target) == expected


def test_lookup_is_case_insensitive_and_rejects_unknown_names() -> None:
    assert len(get_dataset("XOR")) == 4
    assert available_datasets() == ["and", "nand", "nor", "or", "xor"]
    with pytest.raises(UnknownDatasetError):
        get_dataset("implies")
    with pytest.raises(KeyError):
        get_dataset("")
