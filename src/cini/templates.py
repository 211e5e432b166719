"""Text of every file cini writes into a new project."""

from __future__ import annotations

from .config import BuildSystem, Linking, ResolvedConfig

C_MAIN = """\
#include <stdio.h>

int main() {
    printf("Hello, World!\\n");
    return 0;
}
"""

CPP_MAIN = """\
#include <iostream>

int main() {
    std::cout << "Hello, World!" << std::endl;
    return 0;
}
"""

TEST_MAIN = """\
#include <iostream>
#include <cassert>

int main() {
    // Sample test: basic assertion
    assert(1 == 1);
    std::cout << "Test passed!" << std::endl;
    return 0;
}
"""

GITIGNORE = """\
# Compiled object files
*.o

# Precompiled Headers
*.gch

# Libraries
*.lib
*.a
*.so

# Executables
build/

# CMake Files
CMakeFiles/
CMakeCache.txt
cmake_install.cmake
Makefile
"""

SHARED_FLAG = "-shared"


def render_main_source(config: ResolvedConfig) -> str:
    return C_MAIN if config.is_c else CPP_MAIN


def render_test_source() -> str:
    return TEST_MAIN


def render_gitignore() -> str:
    return GITIGNORE


def compile_command(config: ResolvedConfig, name: str) -> str:
    """Compiler invocation used by the Makefile ``build`` target."""

    parts = [config.compiler]
    if config.warning_flags:
        parts.append(config.warning_flags)
    if config.linking == Linking.DYNAMIC:
        parts.append(SHARED_FLAG)
    parts.extend(["-g", config.standard_flag, f"-o build/{name}", f"src/{config.source_name}"])
    return " ".join(parts)


def render_makefile(config: ResolvedConfig, name: str) -> str:
    return (
        ".PHONY: build run clear\n\n"
        f"build:\n\t{compile_command(config, name)}\n\n"
        f"run: build\n\t./build/{name}\n\n"
        f"clear:\n\t@rm -f build/{name}\n"
    )


def render_cmakelists(config: ResolvedConfig, name: str) -> str:
    lang = "C" if config.is_c else "CXX"
    standard = "11" if config.is_c else "23"
    lines = [
        "cmake_minimum_required(VERSION 3.10)",
        f"project({name})",
        f"enable_language({lang})",
        "set(CMAKE_BUILD_TYPE Debug)",
        "set(CMAKE_EXPORT_COMPILE_COMMANDS ON)",
    ]
    if config.warning_flags:
        lines.append(f'set(CMAKE_{lang}_FLAGS "${{CMAKE_{lang}_FLAGS}} {config.warning_flags}")')
    lines += [
        f"set(CMAKE_{lang}_STANDARD {standard})",
        f"set(CMAKE_{lang}_STANDARD_REQUIRED ON)",
        f"add_executable({name} src/{config.source_name})",
        f"target_include_directories({name} PRIVATE inc)",
    ]
    if config.linking == Linking.DYNAMIC:
        lines.append(f'set_target_properties({name} PROPERTIES LINK_FLAGS "{SHARED_FLAG}")')
    if config.wants_tests:
        lines += ["enable_testing()", "add_subdirectory(test)"]
    return "\n".join(lines) + "\n"


def render_test_cmakelists(name: str) -> str:
    # Registered with ctest so `ctest` from the README finds it.
    return (
        f"add_executable({name}_test test.cpp)\n"
        f"add_test(NAME {name}_test COMMAND {name}_test)\n"
    )


def render_readme(config: ResolvedConfig, name: str) -> str:
    text = f"# {name}\n\n## Build Instructions\n\n"
    if config.build_system == BuildSystem.MAKE:
        text += (
            "To compile the project using Make, run:\n\n"
            "```\nmake build\n```\n\n"
            "To run the project, run:\n\n"
            "```\nmake run\n```\n\n"
            "To clean the built binary, run:\n\n"
            "```\nmake clear\n```\n\n"
        )
    else:
        text += (
            "To compile the project using CMake, run:\n\n"
            "```\ncmake -B build\ncmake --build build\n```\n\n"
            "To run the project, run:\n\n"
            f"```\n./build/{name}\n```\n\n"
        )
    if config.wants_docs:
        text += (
            "## Documentation\n\n"
            "Generate documentation with Doxygen:\n\n"
            "```\ndoxygen Doxyfile\n```\n\n"
        )
    if config.wants_tests:
        text += "## Running Tests\n\nRun tests with:\n\n```\nctest\n```\n\n"
    return text


def render_doxyfile(config: ResolvedConfig, name: str) -> str:
    return (
        f'PROJECT_NAME = "{name}"\n'
        f"INPUT = src/{config.source_name}\n"
        "OUTPUT_DIRECTORY = docs\n"
        "GENERATE_LATEX = NO\n"
    )


__all__ = [
    "compile_command",
    "render_cmakelists",
    "render_doxyfile",
    "render_gitignore",
    "render_main_source",
    "render_makefile",
    "render_readme",
    "render_test_cmakelists",
    "render_test_source",
]
