import os
import sys
import unittest


def run_tests():
    # The test modules live in the 't' package next to this file.
    start_dir = os.path.join(os.path.dirname(__file__), 't')
    top_level_dir = os.path.dirname(os.path.dirname(__file__))

    loader = unittest.TestLoader()
    suite = loader.discover(start_dir, pattern='test_*.py',
                            top_level_dir=top_level_dir)
    if suite.countTestCases() == 0:
        print("Error: Could not find any tests.")
        print("Make sure sCurved is installed together with its 't' "
              "package.")
        sys.exit(1)

    # verbosity=0 shows only the summary
    runner = unittest.TextTestRunner(verbosity=0)
    result = runner.run(suite)

    sys.exit(not result.wasSuccessful())


if __name__ == '__main__':
    if len(sys.argv) > 1 and sys.argv[1] == 'test':
        run_tests()
    else:
        print("Unknown command.")
        print("Usage: python -m scurved test")
