import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def abc():
    return {"a": 1, "b": 2, "c": 3}


@pytest.fixture
def falsy_values():
    # Every value is falsy; keys are still present.
    return {"zero": 0, "empty": "", "none": None, "no": False}


@pytest.fixture
def nested_doc():
    return {
        "foo": {
            "entries": [
                {"id": 0},
                {"id": 1},
                {"id": 2, "tags": ("x", "y")},
                {"id": 3, "name": "fourth"},
            ],
        },
        "series": pd.Series([10, 20, 30], index=["x", "y", "z"]),
        "frame": pd.DataFrame({"kwh": [0.5, 1.5]}),
        "array": np.arange(4),
    }
