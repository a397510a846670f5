from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel
from typing import List, Dict, Optional
from io import StringIO
import logging
import threading
import uuid

from config import Settings
from console import Console
from dispatcher import LineDispatcher
from environment import Environment
from errors import BasicError
from interpreter import Interpreter
from program import Program

logger = logging.getLogger(__name__)

app = FastAPI(title="BASIC Interpreter", version="1.0.0")

# --- Modelos de Dados ---
class LineRequest(BaseModel):
    line: str
    inputs: List[str] = []

class LineResponse(BaseModel):
    output: str
    error: Optional[str] = None
    finished: bool = False
    variables: Dict[str, int] = {}

class SessionCreated(BaseModel):
    session_id: str

class ProgramListing(BaseModel):
    lines: List[str]

# --- Sessões ---

class Session:
    """
    Uma sessão do interpretador: programa e variáveis sobrevivem entre
    requisições, a entrada e a saída são trocadas a cada linha enviada.
    """
    def __init__(self, max_steps):
        self.program = Program()
        self.environment = Environment()
        self.max_steps = max_steps
        self.lock = threading.Lock()

    def process(self, line, inputs):
        output = StringIO()
        console = Console(StringIO("".join(f"{value}\n" for value in inputs)), output)
        interpreter = Interpreter(self.program, self.environment, console, self.max_steps)
        error, finished = None, False
        with self.lock:
            try:
                finished = not LineDispatcher(interpreter).process_line(line)
            except BasicError as e:
                logger.info("%s: %s (linha %s)", type(e).__name__, e.detail, e.line)
                error = str(e)
            except EOFError:
                error = "INPUT EXHAUSTED"
        return LineResponse(
            output=output.getvalue(),
            error=error,
            finished=finished,
            variables=self.environment.snapshot(),
        )


sessions: Dict[str, Session] = {}
settings = Settings.from_env()


def get_session(session_id: str) -> Session:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Sessão {session_id} não encontrada")
    return session

# --- Endpoints da API ---
@app.post("/api/sessions", response_model=SessionCreated, status_code=201)
def create_session():
    session_id = uuid.uuid4().hex
    sessions[session_id] = Session(settings.max_steps)
    logger.debug("Sessão %s criada", session_id)
    return SessionCreated(session_id=session_id)

@app.post("/api/sessions/{session_id}/lines", response_model=LineResponse)
def process_line(session_id: str, request: LineRequest):
    result = get_session(session_id).process(request.line, request.inputs)
    if result.finished:
        sessions.pop(session_id, None)
        logger.debug("Sessão %s encerrada por QUIT", session_id)
    return result

@app.get("/api/sessions/{session_id}/program", response_model=ProgramListing)
def list_program(session_id: str):
    session = get_session(session_id)
    return ProgramListing(lines=[entry.source_text for entry in session.program.entries()])

@app.delete("/api/sessions/{session_id}", status_code=204)
def delete_session(session_id: str):
    get_session(session_id)
    sessions.pop(session_id, None)
    return Response(status_code=204)

@app.get("/api/examples")
def get_examples():
    return {
        "sum": {"name": "Soma", "code": "10 REM Soma de dois numeros\n20 INPUT a\n30 INPUT b\n40 LET c = a + b\n50 PRINT c\n60 END"},
        "comparison": {"name": "Maior de dois", "code": "10 REM Compara qual numero e maior\n20 INPUT a\n30 INPUT b\n40 IF a > b THEN 70\n50 PRINT b\n60 GOTO 80\n70 PRINT a\n80 END"},
        "countdown": {"name": "Contagem regressiva", "code": "10 LET n = 5\n20 PRINT n\n30 LET n = n - 1\n40 IF n > 0 THEN 20\n50 END"},
    }
