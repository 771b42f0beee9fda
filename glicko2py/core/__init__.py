"""rating values, scale conversion, composite ratings and the rating system base class"""
