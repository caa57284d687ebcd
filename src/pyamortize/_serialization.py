# -*- coding: utf-8 -*-
"""
This module converts schedules into plain data for consumers outside the package.
"""
import json
import datetime as dt
from dataclasses import asdict
from decimal import Decimal


class ScheduleEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, Decimal):
            return str(obj)
        if isinstance(obj, (dt.date, dt.datetime)):
            return obj.isoformat()
        return super().default(obj)


def schedule_to_records(schedule):
    """Return a list of Statement objects as a list of dictionaries."""
    return [asdict(statement) for statement in schedule]


def schedule_to_json(schedule, indent=2):
    """Return a list of Statement objects as a JSON string, with amounts as strings."""
    return json.dumps(schedule_to_records(schedule), indent=indent, cls=ScheduleEncoder)
