from __future__ import annotations

from cini.config import BuildSystem, Language, Linking
from cini.templates import (
    compile_command,
    render_cmakelists,
    render_doxyfile,
    render_main_source,
    render_makefile,
    render_readme,
)


def test_main_source_per_language(make_config) -> None:
    c_source = render_main_source(make_config(language=Language.C))
    assert 'printf("Hello, World!\\n");' in c_source
    assert "#include <stdio.h>" in c_source

    cpp_source = render_main_source(make_config())
    assert 'std::cout << "Hello, World!" << std::endl;' in cpp_source


def test_compile_command_strict_dynamic(make_config) -> None:
    config = make_config(strictness=2, linking=Linking.DYNAMIC, build_system=BuildSystem.MAKE)
    assert compile_command(config, "demo") == (
        "clang++ -Wall -Wextra -pedantic -fsanitize=address -shared "
        "-g -std=c++23 -o build/demo src/main.cpp"
    )


def test_compile_command_static_c_no_warnings(make_config) -> None:
    config = make_config(language=Language.C, strictness=0, compiler="gcc")
    assert compile_command(config, "demo") == "gcc -g -std=c11 -o build/demo src/main.c"


def test_makefile_targets(make_config) -> None:
    config = make_config(strictness=2, build_system=BuildSystem.MAKE)
    makefile = render_makefile(config, "demo")
    assert makefile.startswith(".PHONY: build run clear\n")
    assert "-fsanitize=address" in makefile
    assert "-shared" not in makefile
    assert "run: build\n\t./build/demo\n" in makefile
    assert "clear:\n\t@rm -f build/demo\n" in makefile


def test_cmakelists_cpp_with_tests(make_config) -> None:
    cmake = render_cmakelists(make_config(with_tests=True), "demo")
    assert "project(demo)\n" in cmake
    assert "enable_language(CXX)\n" in cmake
    assert 'set(CMAKE_CXX_FLAGS "${CMAKE_CXX_FLAGS} -Wall")\n' in cmake
    assert "set(CMAKE_CXX_STANDARD 23)\n" in cmake
    assert "add_executable(demo src/main.cpp)\n" in cmake
    assert "target_include_directories(demo PRIVATE inc)\n" in cmake
    assert cmake.endswith("enable_testing()\nadd_subdirectory(test)\n")


def test_cmakelists_c_dynamic_without_flags(make_config) -> None:
    config = make_config(
        language=Language.C, strictness=0, linking=Linking.DYNAMIC, with_tests=True
    )
    cmake = render_cmakelists(config, "demo")
    assert "enable_language(C)\n" in cmake
    assert "CMAKE_C_FLAGS" not in cmake
    assert "set(CMAKE_C_STANDARD 11)\n" in cmake
    assert 'set_target_properties(demo PROPERTIES LINK_FLAGS "-shared")\n' in cmake
    assert "enable_testing()" not in cmake


def test_readme_sections(make_config) -> None:
    readme = render_readme(make_config(with_tests=True), "demo")
    assert readme.startswith("# demo\n\n## Build Instructions\n")
    assert "cmake -B build" in readme
    assert "## Documentation" in readme
    assert "## Running Tests" in readme

    make_readme = render_readme(
        make_config(language=Language.C, build_system=BuildSystem.MAKE, with_tests=True), "demo"
    )
    assert "make build" in make_readme
    assert "## Documentation" not in make_readme
    assert "## Running Tests" not in make_readme


def test_doxyfile(make_config) -> None:
    doxyfile = render_doxyfile(make_config(), "demo")
    assert 'PROJECT_NAME = "demo"\n' in doxyfile
    assert "INPUT = src/main.cpp\n" in doxyfile
    assert "GENERATE_LATEX = NO\n" in doxyfile
