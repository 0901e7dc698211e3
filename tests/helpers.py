from typing import Dict

VOLUNTEER_CODE = "1957"
ORGANIZER_CODE = "5791"


def signup_body(task_id: str = "landscaping", name: str = "Ada Lovelace", **extra) -> Dict:
    volunteer = {"name": name, "email": f"{name.split()[0].lower()}@example.com", "taskId": task_id}
    volunteer.update(extra)
    return {"gateCode": VOLUNTEER_CODE, "volunteer": volunteer}
