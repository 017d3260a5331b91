from enum import Enum

class MigrationStage(str, Enum):
    LIST_FUNCTIONS = "LIST_FUNCTIONS"
    FETCH_CODE = "FETCH_CODE"
    CONVERT_HANDLERS = "CONVERT_HANDLERS"
    EXTRACT_ROUTES = "EXTRACT_ROUTES"
    ASSEMBLE_SERVER = "ASSEMBLE_SERVER"
    DONE = "DONE"
    FAILED = "FAILED"

PIPELINE = [
    MigrationStage.LIST_FUNCTIONS,
    MigrationStage.FETCH_CODE,
    MigrationStage.CONVERT_HANDLERS,
    MigrationStage.EXTRACT_ROUTES,
    MigrationStage.ASSEMBLE_SERVER,
]

