from .candle_service import CandleService
from .swing_service import SwingService

__all__ = ['CandleService', 'SwingService']
