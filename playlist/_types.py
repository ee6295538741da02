from typing import Annotated

from pydantic import NonNegativeFloat, NonNegativeInt, StringConstraints

type StrippedString = Annotated[str, StringConstraints(min_length=1, strip_whitespace=True)]

Number = int | float
type Milliseconds = NonNegativeInt | NonNegativeFloat
