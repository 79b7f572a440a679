from pydantic import StrictStr

from .base import FormModel


class MembershipRegistration(FormModel):
    # profile fields, prefilled from the user's account
    name: StrictStr
    email: StrictStr
    phone: StrictStr
    branch: StrictStr
    year: StrictStr

    reason_to_join: StrictStr
    expectations: StrictStr
    contribution: StrictStr
    payment_id: StrictStr = ""  # empty until a membership payment exists
