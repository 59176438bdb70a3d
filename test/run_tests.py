"""
Run the test classes without pytest.

Run with: python test/run_tests.py
     or: python test/run_tests.py test_shapes.TestFindShapes
     or: python test/run_tests.py test_shapes.TestFindShapes.test_root_position
"""
import os
import sys

sys.path.insert(0, "src/lib")
sys.path.insert(0, "src/plat_computer")
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

TEST_MODULES = [
    "test_music_theory",
    "test_fretboard",
    "test_constructs",
    "test_shapes",
    "test_config",
    "test_midi",
    "test_engine",
    "test_send_shape",
]


def collect(test_path=None):
    """
    Collect (class, method name) pairs, optionally narrowed by a path like
    'module', 'module.TestClass' or 'module.TestClass.test_method'.
    """
    parts = test_path.split(".") if test_path else []
    modules = [parts[0]] if parts else TEST_MODULES
    class_name = parts[1] if len(parts) >= 2 else None
    method_name = parts[2] if len(parts) >= 3 else None

    selected = []
    for module_name in modules:
        module = __import__(module_name)
        for name in sorted(dir(module)):
            test_class = getattr(module, name)
            if not (name.startswith("Test") and isinstance(test_class, type)):
                continue
            if class_name and name != class_name:
                continue
            methods = [m for m in sorted(dir(test_class)) if m.startswith("test_")]
            if method_name:
                if method_name not in methods:
                    raise ValueError(
                        f"Test method '{method_name}' not found in {name}. "
                        f"Available test methods: {', '.join(methods)}"
                    )
                methods = [method_name]
            selected.extend((test_class, m) for m in methods)
    return selected


def run_tests(test_path=None):
    """Run all tests and report results."""
    passed = 0
    failed = 0
    current_class = None

    for test_class, method_name in collect(test_path):
        if test_class is not current_class:
            current_class = test_class
            print("")
            print(test_class.__module__ + "." + test_class.__name__)
            print("-" * 40)
        try:
            getattr(test_class(), method_name)()
            print("  [OK] " + method_name)
            passed += 1
        except AssertionError as e:
            print("  [FAIL] " + method_name + ": " + str(e))
            failed += 1
        except Exception as e:
            print("  [ERROR] " + method_name + ": " + repr(e))
            failed += 1

    print("")
    print("=" * 40)
    print("Results: " + str(passed) + " passed, " + str(failed) + " failed")
    return failed == 0


if __name__ == "__main__":
    success = run_tests(sys.argv[1] if len(sys.argv) > 1 else None)
    sys.exit(0 if success else 1)
