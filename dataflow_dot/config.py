import os
from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

LOG_LEVEL = os.getenv("DATAFLOW_LOG_LEVEL", "WARNING")
INPUT_ENCODING = os.getenv("DATAFLOW_INPUT_ENCODING", "utf-8")
