# -*- coding: utf-8 -*-

__version__ = '0.2.0'

from samplers.context import get_context, set_context, note

from samplers.moment import MomentAccumulator
from samplers.histogram import (Histogram,
                                HistogramBinner,
                                BoundedHistogramBinner)
from samplers.stream import (StreamReader,
                             StreamWriter,
                             ParseError,
                             StreamClosed)
