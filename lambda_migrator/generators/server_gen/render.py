"""Simple string templates for the Express server (Jinja2-free)."""
import json


def render_server_js(port: int = 3000, handlers_dir: str = "converted") -> str:
    """Generate server.js content.

    The handler table is built from a directory scan at startup, so the file
    does not change with the set of converted functions.

    Args:
        port: Port the server listens on
        handlers_dir: Folder (next to server.js) holding converted handlers
    """
    return f"""import express from 'express';
import bodyParser from 'body-parser';
import fs from 'fs';
import path from 'path';
import {{ fileURLToPath, pathToFileURL }} from 'url';

const __filename = fileURLToPath(import.meta.url);
const __dirname = path.dirname(__filename);

const app = express();
app.use(bodyParser.json());

// Build the route table from the converted handlers folder
const routesDir = path.join(__dirname, '{handlers_dir}');
const routeTable = {{}};

for (const file of fs.readdirSync(routesDir)) {{
  if (file.endsWith('.js')) {{
    const routeHandler = (await import(pathToFileURL(path.join(routesDir, file)).href)).default;
    const routePath = '/' + path.basename(file, '.js');
    routeTable[routePath] = routeHandler;
  }}
}}

for (const [routePath, routeHandler] of Object.entries(routeTable)) {{
  app.all(routePath, routeHandler);
}}

app.listen({port}, () => {{
  console.log('Server running on port {port}');
}});
"""


def render_package_json(name: str = "migrated-lambda-server") -> str:
    """Generate package.json content."""
    package = {
        "name": name,
        "version": "0.1.0",
        "private": True,
        "type": "module",
        "main": "server.js",
        "scripts": {"start": "node server.js"},
        "dependencies": {
            "body-parser": "^1.20.3",
            "express": "^4.21.2",
        },
    }
    return json.dumps(package, indent=2) + "\n"
