from __future__ import annotations

from typing import Annotated

import pytest
from pydantic import BaseModel, ValidationError
from pydantic.types import StringConstraints

from pynec import exceptions


@pytest.mark.parametrize(
    ("error", "builtin"),
    [
        (exceptions.PositionOutOfRangeError(3, 2), IndexError),
        (exceptions.NameNotFoundError("Cl"), KeyError),
        (exceptions.NotNameableError("no name"), TypeError),
        (exceptions.CollectionModifiedError("modified"), RuntimeError),
        (exceptions.IndexDesyncError("desync"), Exception),
    ],
)
def test_hierarchy(error, builtin):
    assert isinstance(error, exceptions.NECException)
    assert isinstance(error, builtin)


def test_position_out_of_range_message():
    error = exceptions.PositionOutOfRangeError(5, 2)
    assert error.position == 5
    assert error.length == 2
    assert str(error) == "position 5 is out of range for a collection of length 2"


def test_name_not_found_message():
    error = exceptions.NameNotFoundError("Chlorine")
    assert error.name == "Chlorine"
    assert str(error) == "no element named 'Chlorine'"


def test_custom_error_msg():
    NameString = Annotated[
        str,
        StringConstraints(pattern=r"^[a-zA-Z0-9]*$"),
        exceptions.custom_error_msg(
            {
                "string_pattern_mismatch": "The field {field_name} can only contain letters and numbers."
            }
        ),
    ]

    class Model(BaseModel):
        field_name: NameString

    with pytest.raises(ValidationError, match="can only contain letters and numbers"):
        Model(field_name="dog@123")
