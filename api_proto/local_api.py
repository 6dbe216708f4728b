import logging
import random

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from sudoku_solver import solve
from sudoku_solver.config import DEFAULT_MIN_GIVENS
from sudoku_solver.csp.generator import random_puzzle
from sudoku_solver.errors import Contradiction, InvalidGrid, SearchLimitReached, Unsolved
from sudoku_solver.postprocess.render_result import build_result

logger = logging.getLogger("sudoku_web")

# Upper bound on search time for one request, in seconds
REQUEST_TIMEOUT = 10.0

app = FastAPI()

class SolveRequest(BaseModel):
    grid: str
    timeout: float | None = None

@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives grid text and returns the solution with a 9x9 board and display lines.
    """
    timeout = request.timeout if request.timeout is not None else REQUEST_TIMEOUT
    try:
        solution = solve(request.grid, timeout=min(timeout, REQUEST_TIMEOUT))
    except InvalidGrid as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (Contradiction, Unsolved) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except SearchLimitReached as e:
        logger.warning("solve timed out: %s", request.grid)
        raise HTTPException(status_code=503, detail=str(e))
    return build_result(request.grid, solution)

@app.get("/api/random")
async def api_random(min_givens: int = DEFAULT_MIN_GIVENS, seed: int | None = None):
    """
    Random puzzle endpoint.
    The same seed always yields the same puzzle.
    """
    try:
        puzzle = random_puzzle(min_givens, rng=random.Random(seed))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"puzzle": puzzle, "givens": sum(ch != "." for ch in puzzle)}
