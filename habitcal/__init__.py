"""habitcal - habit tracker with a monthly calendar and weekly totals."""
