import typing as t

from pydantic import StringConstraints


UpperCase = t.Annotated[str, StringConstraints(to_upper=True)]
AddressPair = tuple[int, int]
