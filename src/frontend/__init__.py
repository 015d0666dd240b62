"""JSON HTTP API on top of wordpredict.PredictionModel (Flask)."""
