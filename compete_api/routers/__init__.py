from typing import Annotated
from fastapi import Path
from compete_api.utils.validation import MAX_ID, numeric


UserIdType = Annotated[
    int, Path(gt=0, le=MAX_ID), numeric("User ID must be a number")
]
CompetitionIdType = Annotated[
    int, Path(gt=0, le=MAX_ID), numeric("Competition ID must be a number")
]
TeamIdType = Annotated[
    int, Path(gt=0, le=MAX_ID), numeric("Team ID must be a number")
]
RegistrationIdType = Annotated[
    int, Path(gt=0, le=MAX_ID), numeric("Registration ID must be a number")
]
MessageIdType = Annotated[
    int, Path(gt=0, le=MAX_ID), numeric("Message ID must be a number")
]
BlogIdType = Annotated[
    int, Path(gt=0, le=MAX_ID), numeric("Blog ID must be a number")
]
CommentIdType = Annotated[
    int, Path(gt=0, le=MAX_ID), numeric("Comment ID must be a number")
]
