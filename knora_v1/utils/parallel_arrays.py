from typing import Any, Dict, List, Sequence


def _populated(obj, fields: Sequence[str]) -> Dict[str, list]:
    arrays = {}
    for field in fields:
        value = getattr(obj, field, None)
        if value is not None:
            arrays[field] = value
    return arrays


def check_parallel_arrays(obj, fields: Sequence[str]) -> None:
    """Check that the populated arrays among `fields` have equal length.

    The Nth entry of every array describes the same item, so an array is
    either absent or as long as its siblings.
    """
    arrays = _populated(obj, fields)
    lengths = {field: len(value) for field, value in arrays.items()}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{field}={length}" for field, length in lengths.items())
        raise ValueError(f"parallel arrays differ in length: {detail}")


def zip_parallel(obj, fields: Sequence[str]) -> List[Dict[str, Any]]:
    """Return one dict per index, holding the entries of the populated arrays."""
    arrays = _populated(obj, fields)
    if not arrays:
        return []
    size = len(next(iter(arrays.values())))
    return [
        {field: value[i] for field, value in arrays.items()}
        for i in range(size)
    ]
