import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

# Gradient-descent SVD hyperparameters
SVD_FEATURE_COUNT = int(os.getenv("RECGRAPH_SVD_FEATURE_COUNT", "100"))
SVD_LEARNING_RATE = float(os.getenv("RECGRAPH_SVD_LEARNING_RATE", "0.001"))
SVD_FEATURE_TRAINING_THRESHOLD = float(
    os.getenv("RECGRAPH_SVD_FEATURE_TRAINING_THRESHOLD", "1.0e-5")
)
SVD_REGULARIZATION = float(os.getenv("RECGRAPH_SVD_REGULARIZATION", "0.015"))
SVD_ITERATION_COUNT = int(os.getenv("RECGRAPH_SVD_ITERATION_COUNT", "0"))

# Suffix appended to MRR result columns (empty = none)
MRR_SUFFIX = os.getenv("RECGRAPH_MRR_SUFFIX") or None

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("RECGRAPH_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
