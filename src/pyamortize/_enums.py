# -*- coding: utf-8 -*-
from enum import Enum


class AdjustedScheduleMode(Enum):
    LENIENT = 'lenient'
    STRICT = 'strict'
