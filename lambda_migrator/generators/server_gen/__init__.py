from lambda_migrator.generators.server_gen.generator import generate_server

__all__ = ["generate_server"]
