from __future__ import annotations
import logging
from quiz_core.config import PORT
def main():
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    # run from the project root so "api.app" resolves
    uvicorn.run("api.app:app", host="0.0.0.0", port=PORT)
if __name__ == "__main__": main()
