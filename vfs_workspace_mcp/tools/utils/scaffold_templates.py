"""File templates for the project types create_project_scaffold can generate.

Each builder returns a flat ``{relative_path: content}`` mapping for
``tree_from_files``.
"""

import json
from collections.abc import Callable


def react_files(name: str) -> dict[str, str]:
    package = {
        "name": name,
        "version": "0.1.0",
        "private": True,
        "dependencies": {
            "react": "^18.2.0",
            "react-dom": "^18.2.0",
            "react-scripts": "5.0.1",
        },
        "scripts": {
            "start": "react-scripts start",
            "build": "react-scripts build",
            "test": "react-scripts test",
            "eject": "react-scripts eject",
        },
    }
    return {
        "package.json": json.dumps(package, indent=2),
        "public/index.html": f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{name}</title>
</head>
<body>
    <div id="root"></div>
</body>
</html>""",
        "src/index.js": """import React from 'react';
import ReactDOM from 'react-dom/client';
import App from './App';

const root = ReactDOM.createRoot(document.getElementById('root'));
root.render(<App />);""",
        "src/App.js": f"""import React from 'react';

function App() {{
  return (
    <div className="App">
      <h1>Welcome to {name}</h1>
      <p>Your React app is ready to go!</p>
    </div>
  );
}}

export default App;""",
    }


def python_files(name: str) -> dict[str, str]:
    return {
        "main.py": f'''#!/usr/bin/env python3
"""
{name} - A Python project
"""

def main():
    print("Hello from {name}!")
    print("Your Python project is ready!")

if __name__ == "__main__":
    main()''',
        "requirements.txt": """# Add your Python dependencies here
# Example:
# requests>=2.25.1
# flask>=2.0.1""",
        "README.md": f"""# {name}

A Python project.

## Setup

1. Install dependencies:
   ```
   pip install -r requirements.txt
   ```

2. Run the project:
   ```
   python main.py
   ```""",
    }


def node_files(name: str) -> dict[str, str]:
    package = {
        "name": name,
        "version": "1.0.0",
        "description": f"{name} - A Node.js project",
        "main": "index.js",
        "scripts": {"start": "node index.js", "dev": "nodemon index.js"},
        "dependencies": {},
        "devDependencies": {"nodemon": "^2.0.20"},
    }
    return {
        "package.json": json.dumps(package, indent=2),
        "index.js": f"""// {name} - Node.js Application
const express = require('express');

const app = express();
const port = process.env.PORT || 3000;

app.use(express.json());

app.get('/', (req, res) => {{
    res.json({{
        message: 'Welcome to {name}!',
        status: 'Your Node.js app is ready!'
    }});
}});

app.listen(port, () => {{
    console.log(`Server running on port ${{port}}`);
}});""",
    }


def html_files(name: str) -> dict[str, str]:
    return {
        "index.html": f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <link rel="stylesheet" href="styles.css">
</head>
<body>
    <div class="container">
        <h1>Welcome to {name}</h1>
        <p>Your web project is ready!</p>
        <button onclick="showAlert()">Click me!</button>
    </div>
    <script src="script.js"></script>
</body>
</html>""",
        "styles.css": f"""/* {name} Styles */
* {{
    margin: 0;
    padding: 0;
    box-sizing: border-box;
}}

body {{
    font-family: Arial, sans-serif;
    line-height: 1.6;
    color: #333;
    background-color: #f4f4f4;
}}

.container {{
    max-width: 800px;
    margin: 50px auto;
    padding: 20px;
    background: white;
    border-radius: 10px;
    box-shadow: 0 0 10px rgba(0,0,0,0.1);
    text-align: center;
}}

h1 {{
    color: #2c3e50;
    margin-bottom: 20px;
}}

button {{
    background: #3498db;
    color: white;
    padding: 10px 20px;
    border: none;
    border-radius: 5px;
    cursor: pointer;
    font-size: 16px;
    margin-top: 20px;
}}

button:hover {{
    background: #2980b9;
}}""",
        "script.js": f"""// {name} JavaScript
console.log('{name} loaded successfully!');

function showAlert() {{
    alert('Hello from {name}! Your web project is working!');
}}

// Add your JavaScript code here
document.addEventListener('DOMContentLoaded', function() {{
    console.log('DOM loaded, {name} is ready!');
}});""",
    }


class ScaffoldTemplate:
    def __init__(self, label: str, build: Callable[[str], dict[str, str]]):
        self.label = label
        self.build = build


# Keyed by the lowercased project type, aliases included
SCAFFOLD_TEMPLATES: dict[str, ScaffoldTemplate] = {
    "react": ScaffoldTemplate("React", react_files),
    "python": ScaffoldTemplate("Python", python_files),
    "node": ScaffoldTemplate("Node.js", node_files),
    "nodejs": ScaffoldTemplate("Node.js", node_files),
    "html": ScaffoldTemplate("HTML/CSS/JS", html_files),
    "web": ScaffoldTemplate("HTML/CSS/JS", html_files),
}

SUPPORTED_PROJECT_TYPES = ("react", "python", "node", "html")
