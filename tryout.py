from smartcalc.errors import CalcError
from smartcalc.normalizer import normalize
from smartcalc.parser import to_postfix
from smartcalc.runtime import evaluate_postfix
from smartcalc.tokenizer import tokenize, untokenize
from smartcalc.variables import VariableStore

variables = VariableStore({"a": 4, "b": 5, "c": 6})

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "80225/+2",
    "7/6/2000",
    "-7 / 2",
    "2 -- 2",
    "3 +++ -4",
    "5 --- 3",
    "5 -+- 3",
    "a*2+b*3+c*(2+3)",
    "10 / 5/ 2",
    "(1 + 2",
    "1 + 2)",
    "1 / 0",
    "x + 1",
    "99999999999999999999 * 99999999999999999999",
]:
    print("=" * 10)
    print(f"code: {code!r}")

    normalized = normalize(code)
    print(f"normalized: {normalized!r}")

    try:
        tokens = tokenize(normalized)
        print(f"tokens: {' '.join(str(t) for t in tokens)}")

        postfix = to_postfix(tokens)
        print(f"postfix: {untokenize(postfix)}")

        result = evaluate_postfix(postfix, variables)
    except CalcError as e:
        print(e)
        continue

    print(f"result: {result}")

print(f"variables: {variables}")
