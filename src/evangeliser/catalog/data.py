"""data.py - the built-in pattern catalog.

each entry: the JS/TS idiom, the rule that spots it, the ReScript that
says the same thing, and a narrative that starts from what the person
already got right. order is significant (see catalog.py).
"""

from evangeliser.catalog.catalog import PatternCatalog, build_pattern
from evangeliser.catalog.types import Narrative as N

_PATTERNS = []


def _p(id, name, category, difficulty, rule, confidence, before, after,
       narrative, tags=(), related=(), objectives=(), mistakes=(), practices=()):
    """register a built-in pattern, in teaching order."""
    _PATTERNS.append(build_pattern(
        id=id, name=name, category=category, difficulty=difficulty,
        rule=rule, confidence=confidence, before=before, after=after,
        narrative=narrative, tags=tags, related=related,
        objectives=objectives, mistakes=mistakes, practices=practices,
    ))


# ============================================================
# NULL SAFETY
# ============================================================

_p("null-check-basic", "Null and undefined check", "NullSafety", "Beginner",
   r"!==?\s*null\s*&&[^&|]{0,200}!==?\s*undefined", 0.9,
   "if (user !== null && user !== undefined) {\n  console.log(user.name);\n}",
   "switch user {\n| Some(u) => Console.log(u.name)\n| None => ()\n}",
   N("You're guarding against null and undefined. That's careful, defensive thinking!",
     "Checking both cases by hand is easy to forget in the one place it matters.",
     "ReScript folds both into option<'a>: Some(value) or None, and switch makes you handle each.",
     "The compiler refuses to let you read user.name until you've proven the user exists.",
     "switch user { | Some(u) => u.name | None => \"guest\" }"),
   tags=("null", "undefined", "option"), related=("optional-chaining", "nullish-coalescing"),
   objectives=("Model possibly-missing values with option<'a>",),
   mistakes=("Checking null but forgetting undefined",),
   practices=("Return option from functions that can come back empty",))

_p("optional-chaining", "Optional chaining", "NullSafety", "Intermediate",
   r"\w\?\.[A-Za-z_$\[(]", 0.9,
   "const city = user?.address?.city;",
   "let city = user->Option.flatMap(u => u.address)->Option.map(a => a.city)",
   N("Optional chaining! You already know that data has holes in it.",
     "The ?. chain quietly produces undefined, and that undefined travels far before anyone notices.",
     "In ReScript the chain is Option.flatMap and Option.map, and the result type says it may be missing.",
     "You can't accidentally treat the result as a definite string; the type is option<string>.",
     "user->Option.flatMap(u => u.address)->Option.map(a => a.city)"),
   tags=("null", "chaining", "option"), related=("null-check-basic", "nullish-coalescing"),
   objectives=("Chain lookups over option values",),
   mistakes=("Sprinkling ?. everywhere instead of fixing the data shape",),
   practices=("Make fields optional in the type only when they really are",))

# ============================================================
# DEFAULTS
# ============================================================

_p("nullish-coalescing", "Nullish coalescing", "Defaults", "Beginner",
   r"[\w)\]]\s*\?\?\s*[^\s=?]", 0.9,
   "const name = input ?? \"anonymous\";",
   "let name = input->Option.getOr(\"anonymous\")",
   N("Great use of ?? to pick a sensible fallback!",
     "?? works, but nothing in the types tells the next reader that input can be missing.",
     "Option.getOr says the same thing and the option type makes the possibility visible.",
     "Every caller sees option<string> and has to decide on a fallback too.",
     "input->Option.getOr(\"anonymous\")"),
   tags=("defaults", "null", "option"), related=("optional-chaining", "logical-or-default"),
   objectives=("Unwrap an option with a default",),
   mistakes=("Using || where 0 or \"\" are valid values",),
   practices=("Pick defaults at the edge, keep the core typed",))

_p("default-params", "Default parameters", "Defaults", "Beginner",
   r"\bfunction\b\s*(?:\w+\s*)?\([^)=]{0,200}=(?![=>])", 0.85,
   "function greet(name = \"friend\") {\n  return `Hi ${name}`;\n}",
   "let greet = (~name=\"friend\", ()) => `Hi ${name}`",
   N("Default parameters keep your call sites tidy. Nice!",
     "Positional defaults get confusing once there are two or three of them.",
     "ReScript has labeled arguments with defaults, so call sites name what they override.",
     "The compiler checks every label, so a typo is an error instead of a silent default.",
     "greet(~name=\"Ada\", ())"),
   tags=("defaults", "parameters", "labeled-arguments"), related=("nullish-coalescing",),
   objectives=("Use labeled arguments with default values",),
   mistakes=("Relying on argument order for optional values",),
   practices=("Label optional arguments and end with a unit argument",))

_p("logical-or-default", "Logical OR fallback", "Defaults", "Beginner",
   r"=\s*[\w.]+\s*\|\|\s*(?:['\"\d\[{]|null\b|true\b|false\b)", 0.75,
   "const port = config.port || 3000;",
   "let port = config.port->Option.getOr(3000)",
   N("You reached for a fallback value. That's thinking about the unhappy path!",
     "|| also replaces 0, false and \"\" which are sometimes perfectly good values.",
     "Option.getOr only kicks in for a real None.",
     "A port of 0 stays 0; only a missing port becomes 3000.",
     "config.port->Option.getOr(3000)"),
   tags=("defaults", "falsy"), related=("nullish-coalescing",),
   objectives=("Separate 'missing' from 'falsy'",),
   mistakes=("Losing valid zero values to ||",),
   practices=("Prefer explicit options over truthiness",))

# ============================================================
# ASYNC + PROMISES
# ============================================================

_p("async-await", "Async/await", "Async", "Intermediate",
   r"\basync\s+(?:function\b|\w+\s*(?:\(|=>)|\()", 0.9,
   "async function load(id) {\n  const res = await fetch(`/users/${id}`);\n  return res.json();\n}",
   "let load = async id => {\n  let res = await fetch(`/users/${id}`)\n  await res->Response.json\n}",
   N("async/await reads like a story. You're writing readable asynchronous code!",
     "The return type is just Promise<any>, so callers can't tell what comes back.",
     "ReScript keeps async/await and adds promise<'a>, so the value inside is typed.",
     "A function returning promise<user> can't be awaited into the wrong shape.",
     "let user: promise<user> = load(42)"),
   tags=("async", "await", "promise"), related=("promise-then", "promise-all"),
   objectives=("Type the value a promise resolves to",),
   mistakes=("Forgetting await and passing a promise where a value was expected",),
   practices=("Return result<'a, 'e> from async functions that can fail",))

_p("promise-all", "Promise.all", "Async", "Intermediate",
   r"\bPromise\.all(?:Settled)?\s*\(", 0.95,
   "const [user, posts] = await Promise.all([getUser(), getPosts()]);",
   "let (user, posts) = await Promise.all2((getUser(), getPosts()))",
   N("Running work in parallel with Promise.all. That's performance-minded!",
     "An array destructure of mixed results loses which type sits at which index.",
     "Promise.all2 and friends take a tuple, so each position keeps its own type.",
     "user is a user and posts is array<post>; no index guessing.",
     "Promise.all2((getUser(), getPosts()))"),
   tags=("async", "parallel", "tuple"), related=("async-await",),
   objectives=("Combine differently-typed promises with tuples",),
   mistakes=("Awaiting in a loop when the calls are independent",),
   practices=("Use allSettled-style results when partial failure is fine",))

_p("promise-then", "Promise .then chain", "PromiseChain", "Beginner",
   r"\.then\s*\(", 0.9,
   "fetchUser(id).then(user => render(user));",
   "fetchUser(id)->Promise.thenResolve(user => render(user))",
   N("Chaining with .then shows you think in pipelines!",
     "Deep .then chains get hard to follow, and each step is untyped.",
     "ReScript's Promise module pipes with ->, and each step knows its input type.",
     "Return the wrong thing from a step and the next step won't compile.",
     "fetchUser(id)->Promise.thenResolve(render)"),
   tags=("promise", "chaining"), related=("async-await", "promise-catch"),
   objectives=("Pipe promises with Promise.then and thenResolve",),
   mistakes=("Forgetting to return the inner promise inside .then",),
   practices=("Switch to async/await once a chain passes three steps",))

_p("promise-catch", "Promise .catch", "PromiseChain", "Intermediate",
   r"\.catch\s*\(", 0.85,
   "load().catch(err => console.error(err));",
   "load()->Promise.catch(err => {\n  Console.error(err)\n  Promise.resolve(Error(\"load failed\"))\n})",
   N("You're handling promise failures. So many people skip this!",
     "A .catch that only logs turns a failure into undefined for whoever's next.",
     "ReScript nudges you to resolve to a result, so the failure stays a value.",
     "Callers must match Ok and Error; the failure can't vanish.",
     "load()->Promise.catch(_ => Promise.resolve(Error(\"load failed\")))"),
   tags=("promise", "errors"), related=("promise-then", "try-catch"),
   objectives=("Turn rejections into result values",),
   mistakes=("Swallowing errors with an empty catch",),
   practices=("Keep one catch at the boundary, not one per step",))

_p("new-promise", "Promise constructor", "PromiseChain", "Advanced",
   r"\bnew\s+Promise\s*\(", 0.95,
   "const wait = ms => new Promise(resolve => setTimeout(resolve, ms));",
   "let wait = ms => Promise.make((resolve, _) => setTimeout(() => resolve(), ms)->ignore)",
   N("Wrapping a callback API in a Promise is a genuinely advanced move!",
     "Hand-built promises can resolve twice or never, and nothing checks it.",
     "Promise.make has the same shape with typed resolve and reject.",
     "resolve takes exactly the promised type, so wait can't resolve with a string by accident.",
     "Promise.make((resolve, _reject) => resolve(42))"),
   tags=("promise", "callbacks"), related=("node-callback", "promise-then"),
   objectives=("Adapt callback APIs to promises safely",),
   mistakes=("Never calling reject on the error path",),
   practices=("Wrap each callback API once, in one module",))

# ============================================================
# ERROR HANDLING
# ============================================================

_p("try-catch", "try/catch", "ErrorHandling", "Beginner",
   r"\btry\s*\{", 0.95,
   "try {\n  const data = JSON.parse(text);\n} catch (e) {\n  console.error(e);\n}",
   "switch JSON.parseExn(text) {\n| data => Ok(data)\n| exception JsExn(e) => Error(e)\n}",
   N("You're anticipating failure with try/catch. That's resilient code!",
     "Nothing in a function's signature says it might throw, so callers forget the try.",
     "ReScript lets you catch inside switch and return result<'a, 'e> instead of throwing.",
     "A result must be matched; the error path can't be skipped by accident.",
     "let parse = text => try Ok(JSON.parseExn(text)) catch { | _ => Error(\"bad json\") }"),
   tags=("errors", "exceptions", "result"), related=("throw-error", "promise-catch"),
   objectives=("Represent failure with result<'a, 'e>",),
   mistakes=("Catching everything and logging nothing",),
   practices=("Throw at the edge only; return results everywhere else",))

_p("throw-error", "Throwing errors", "ErrorHandling", "Intermediate",
   r"\bthrow\s+new\s+\w*Error\b", 0.9,
   "if (!valid) {\n  throw new Error(\"invalid input\");\n}",
   "if !valid {\n  Error(#InvalidInput)\n} else {\n  Ok(input)\n}",
   N("Clear error messages! You care about the person debugging later.",
     "A throw is an invisible second return path that callers have to know about.",
     "Return Error(...) with a variant describing what went wrong.",
     "Error variants are checked exhaustively, so new failure kinds can't go unhandled.",
     "Error(#InvalidInput)"),
   tags=("errors", "exceptions", "variants"), related=("try-catch",),
   objectives=("Describe failures with polymorphic variants",),
   mistakes=("Throwing strings instead of errors",),
   practices=("Name each failure case in a variant",))

# ============================================================
# ARRAYS
# ============================================================

_p("array-map", "Array map", "ArrayOperations", "Beginner",
   r"\.map\s*\(\s*(?:\([\w\s,]{0,80}\)|\w+)\s*=>", 0.95,
   "const doubled = numbers.map(n => n * 2);",
   "let doubled = numbers->Array.map(n => n * 2)",
   N("You're using map! That's already functional thinking.",
     "JavaScript won't tell you if n is sometimes a string.",
     "ReScript's Array.map is the same idea, piped, with the element type known.",
     "numbers is array<int>, so n * 2 is checked and doubled is array<int>.",
     "numbers->Array.map(n => n * 2)"),
   tags=("array", "map", "functional"), related=("array-filter", "array-reduce"),
   objectives=("Transform collections without mutation",),
   mistakes=("Using map for side effects and ignoring the result",),
   practices=("Keep map callbacks pure",))

_p("array-filter", "Array filter", "ArrayOperations", "Beginner",
   r"\.filter\s*\(\s*(?:\([\w\s,]{0,80}\)|\w+)\s*=>", 0.95,
   "const adults = people.filter(p => p.age >= 18);",
   "let adults = people->Array.filter(p => p.age >= 18)",
   N("filter is a great choice, you're describing what to keep, not how to loop!",
     "Nothing checks that the callback really returns a boolean.",
     "Array.filter in ReScript requires a bool-returning predicate.",
     "Return a number or undefined by mistake and it won't compile.",
     "people->Array.filter(p => p.age >= 18)"),
   tags=("array", "filter", "functional"), related=("array-map", "array-find"),
   objectives=("Select elements with a typed predicate",),
   mistakes=("Relying on truthy values in predicates",),
   practices=("Name predicates that get reused",))

_p("array-reduce", "Array reduce", "ArrayOperations", "Intermediate",
   r"\.reduce\s*\(", 0.9,
   "const total = prices.reduce((sum, p) => sum + p, 0);",
   "let total = prices->Array.reduce(0.0, (sum, p) => sum +. p)",
   N("reduce! You're folding a whole collection into one value. Powerful stuff.",
     "Forget the initial value and reduce on an empty array throws.",
     "ReScript puts the initial value first and makes it mandatory.",
     "sum and p have fixed types; +. even tells you these are floats.",
     "prices->Array.reduce(0.0, (sum, p) => sum +. p)"),
   tags=("array", "reduce", "fold"), related=("array-map", "for-loop-push"),
   objectives=("Fold collections with an explicit initial value",),
   mistakes=("Omitting the initial accumulator",),
   practices=("Reach for map/filter first; reduce when nothing else fits",))

_p("array-find", "Array find", "ArrayOperations", "Beginner",
   r"\.find(?:Index)?\s*\(", 0.9,
   "const admin = users.find(u => u.role === \"admin\");",
   "let admin = users->Array.find(u => u.role == Admin)",
   N("find is exactly the right tool for 'the first one that matches'!",
     "find returns undefined when nothing matches, and that's easy to forget.",
     "Array.find returns option<user>, so 'not found' is part of the type.",
     "You have to handle None before using the admin.",
     "users->Array.find(u => u.role == Admin)"),
   tags=("array", "find", "option"), related=("array-filter", "null-check-basic"),
   objectives=("Treat lookups as optional results",),
   mistakes=("Dereferencing the result of find without a check",),
   practices=("Match on the option right where you use it",))

_p("for-loop-push", "Loop and push", "ArrayOperations", "Beginner",
   r"\bfor\s*\([^)]{0,200}\)\s*\{[^}]{0,500}\.push\s*\(", 0.8,
   "const out = [];\nfor (let i = 0; i < xs.length; i++) {\n  out.push(xs[i] * 2);\n}",
   "let out = xs->Array.map(x => x * 2)",
   N("You know exactly how to build an array step by step. Solid fundamentals!",
     "Index bookkeeping and a mutable array are where off-by-one bugs live.",
     "Say what you want with Array.map or Array.filter and the loop disappears.",
     "No index means no out-of-bounds access.",
     "xs->Array.map(x => x * 2)"),
   tags=("array", "loops", "mutation"), related=("array-map", "array-reduce"),
   objectives=("Replace accumulation loops with map/filter/reduce",),
   mistakes=("Off-by-one loop bounds",),
   practices=("Prefer expressions that produce new arrays",))

# ============================================================
# CONDITIONALS + PATTERN MATCHING
# ============================================================

_p("ternary-operator", "Ternary expression", "Conditionals", "Beginner",
   r"[\w)\]]\s+\?\s+[^:;?\n]{1,200}\s:\s+", 0.7,
   "const label = count > 0 ? \"items\" : \"empty\";",
   "let label = count > 0 ? \"items\" : \"empty\"",
   N("Ternaries show you think of conditions as values!",
     "Nested ternaries get hard to read fast.",
     "In ReScript, if/else is itself an expression, so you can skip the ternary once it grows.",
     "Both branches must have the same type, checked by the compiler.",
     "let label = if count > 0 { \"items\" } else { \"empty\" }"),
   tags=("conditionals", "expressions"), related=("if-else-chain", "switch-statement"),
   objectives=("Use if/else as an expression",),
   mistakes=("Nesting ternaries three deep",),
   practices=("Switch to pattern matching once there are more than two cases",))

_p("if-else-chain", "if / else if chain", "Conditionals", "Beginner",
   r"\}\s*else\s+if\s*\(", 0.8,
   "if (s === \"a\") { one(); } else if (s === \"b\") { two(); } else { other(); }",
   "switch s {\n| \"a\" => one()\n| \"b\" => two()\n| _ => other()\n}",
   N("You're covering several cases, including the fallback. Thorough!",
     "A long else-if ladder hides which cases exist and which are missing.",
     "A switch lists every case in one place, and with variants it's checked to be complete.",
     "Add a new case to the variant and every switch that forgot it fails to compile.",
     "switch s { | \"a\" => one() | \"b\" => two() | _ => other() }"),
   tags=("conditionals", "branching"), related=("switch-statement", "ternary-operator"),
   objectives=("Turn condition ladders into pattern matches",),
   mistakes=("Forgetting the final else",),
   practices=("Model the cases as a variant first",))

_p("switch-statement", "switch statement", "PatternMatching", "Intermediate",
   r"\bswitch\s*\([^)]{0,200}\)\s*\{", 0.9,
   "switch (action.type) {\n  case \"add\": return add(action);\n  default: return state;\n}",
   "switch action {\n| Add(item) => add(item)\n| Remove(id) => remove(id)\n}",
   N("switch is already pattern matching in spirit. You're close!",
     "JS switch falls through without break and never warns about missing cases.",
     "ReScript's switch matches on shape, binds data, never falls through, and checks exhaustiveness.",
     "Forget a case and the compiler names the one you missed.",
     "switch action { | Add(item) => add(item) | Remove(id) => remove(id) }"),
   tags=("switch", "pattern-matching", "variants"), related=("if-else-chain", "string-union-type"),
   objectives=("Destructure data inside match arms",),
   mistakes=("Missing break causing fall-through",),
   practices=("Avoid the catch-all _ when you want exhaustiveness checks",))

# ============================================================
# DESTRUCTURING
# ============================================================

_p("object-destructuring", "Object destructuring", "Destructuring", "Beginner",
   r"\b(?:const|let|var)\s*\{[^}]{0,200}\}\s*=", 0.9,
   "const { name, age } = user;",
   "let {name, age} = user",
   N("Destructuring! You pull out exactly what you need. Clean.",
     "Destructure a field that doesn't exist and you silently get undefined.",
     "ReScript record destructuring looks the same but only allows fields the type has.",
     "Misspell a field and it's a compile error, not an undefined.",
     "let {name, age} = user"),
   tags=("destructuring", "records"), related=("array-destructuring",),
   objectives=("Destructure records safely",),
   mistakes=("Destructuring from a possibly-null object",),
   practices=("Destructure in function parameters when it helps clarity",))

_p("array-destructuring", "Array destructuring", "Destructuring", "Beginner",
   r"\b(?:const|let|var)\s*\[[^\]]{0,200}\]\s*=", 0.9,
   "const [first, second] = pair;",
   "let (first, second) = pair",
   N("Array destructuring, nice and concise!",
     "Arrays don't promise a length, so second may be undefined.",
     "Use a tuple in ReScript when the size is fixed; the shape is then guaranteed.",
     "A tuple of two always has two, each with its own type.",
     "let (first, second) = pair"),
   tags=("destructuring", "tuples"), related=("object-destructuring", "promise-all"),
   objectives=("Use tuples for fixed-size groups",),
   mistakes=("Assuming an array has at least two elements",),
   practices=("Return tuples for small fixed groups of values",))

# ============================================================
# FUNCTIONS
# ============================================================

_p("curried-function", "Curried function", "Functional", "Advanced",
   r"=>\s*(?:\([\w\s]{0,40}\)|\w+)\s*=>", 0.85,
   "const add = a => b => a + b;",
   "let add = (a, b) => a + b\nlet addFive = add(5, ...)",
   N("Currying! You're treating functions as building blocks. That's advanced.",
     "Hand-curried arrows make the call site add(1)(2) awkward.",
     "ReScript functions take all arguments at once, and partial application uses ... explicitly.",
     "Partial application is type-checked, so add(5, ...) is known to be int => int.",
     "let addFive = add(5, ...)"),
   tags=("functional", "currying", "partial-application"), related=("arrow-function", "nested-calls"),
   objectives=("Use explicit partial application",),
   mistakes=("Mixing curried and uncurried call styles",),
   practices=("Put the data argument first so it pipes well",))

_p("arrow-function", "Arrow function", "ArrowFunctions", "Beginner",
   r"(?:\([\w\s,]{0,200}\)|\b\w+)\s*=>", 0.85,
   "const square = x => x * x;",
   "let square = x => x * x",
   N("Arrow functions, short and sweet. You already write ReScript-shaped code!",
     "Arrow functions are where untyped parameters hide.",
     "The ReScript syntax is almost identical, and every parameter gets an inferred type.",
     "square(\"3\") is rejected at compile time.",
     "let square = (x: int) => x * x"),
   tags=("functions", "arrow", "inference"), related=("curried-function",),
   objectives=("Let inference type small functions",),
   mistakes=("Returning an object literal without parentheses",),
   practices=("Annotate exported functions, let inference handle the rest",))

# ============================================================
# TEMPLATES
# ============================================================

_p("template-literal", "Template literal", "Templates", "Beginner",
   r"`[^`]{0,400}?\$\{[^}`]{1,200}\}[^`]{0,400}`", 0.95,
   "const msg = `Hello, ${name}! You have ${count} messages.`;",
   "let msg = `Hello, ${name}! You have ${Int.toString(count)} messages.`",
   N("Template literals make strings so much more readable. Great choice!",
     "Anything can be interpolated, including objects that print as [object Object].",
     "ReScript template strings only accept strings, so conversions are explicit.",
     "Interpolate an int by mistake and the compiler asks you to convert it.",
     "`Hello, ${name}!`"),
   tags=("strings", "templates"), related=("string-concatenation",),
   objectives=("Convert values to strings explicitly",),
   mistakes=("Interpolating objects directly",),
   practices=("Keep formatting logic in small helper functions",))

_p("string-concatenation", "String concatenation", "Templates", "Beginner",
   r"['\"][^'\"\n]*['\"]\s*\+\s*\w+|\b\w+\s*\+\s*['\"][^'\"\n]*['\"]", 0.7,
   "const greeting = \"Hello, \" + name + \"!\";",
   "let greeting = \"Hello, \" ++ name ++ \"!\"",
   N("You're building strings by hand. You know exactly what goes where!",
     "+ means both addition and concatenation, so \"1\" + 1 is \"11\".",
     "ReScript uses ++ for strings only, and + for ints only.",
     "Mixing numbers and strings is a compile error, not a surprise.",
     "\"Hello, \" ++ name ++ \"!\""),
   tags=("strings", "operators"), related=("template-literal",),
   objectives=("Keep numeric and string operators apart",),
   mistakes=("Accidental string + number coercion",),
   practices=("Use template strings for more than two pieces",))

# ============================================================
# VARIANTS + TYPES
# ============================================================

_p("string-union-type", "String union type", "Variants", "Intermediate",
   r"\btype\s+\w+\s*=\s*(?:\|\s*)?['\"][^'\"\n]{0,200}['\"]\s*\|", 0.95,
   "type Status = \"loading\" | \"done\" | \"failed\";",
   "type status = Loading | Done | Failed",
   N("A union of string literals. You're already modeling states precisely!",
     "String unions can't carry data per case and are easy to mistype at runtime boundaries.",
     "ReScript variants are the real thing: named cases that can carry payloads.",
     "switch on a variant is checked for completeness.",
     "type status = Loading | Done(string) | Failed(exn)"),
   tags=("variants", "unions", "types"), related=("ts-enum", "switch-statement"),
   objectives=("Model states with variants carrying data",),
   mistakes=("Booleans like isLoading and isError that can both be true",),
   practices=("Make impossible states unrepresentable",))

_p("ts-enum", "TypeScript enum", "Variants", "Intermediate",
   r"\benum\s+\w+\s*\{", 0.95,
   "enum Color { Red, Green, Blue }",
   "type color = Red | Green | Blue",
   N("Enums show you like a closed set of options. Good instinct!",
     "TS numeric enums accept any number, so Color(42) type-checks.",
     "A ReScript variant is a closed set. Nothing else fits.",
     "Only Red, Green or Blue can ever be a color.",
     "type color = Red | Green | Blue"),
   tags=("variants", "enums"), related=("string-union-type",),
   objectives=("Replace enums with variants",),
   mistakes=("Relying on enum numeric values",),
   practices=("Convert to strings at the boundary, not in the core",))

_p("typeof-check", "typeof check", "TypeSafety", "Intermediate",
   r"\btypeof\s+[\w.]+\s*[!=]==?\s*['\"]\w+['\"]", 0.85,
   "if (typeof value === \"string\") {\n  return value.toUpperCase();\n}",
   "let shout = (value: string) => value->String.toUpperCase",
   N("Checking types at runtime shows you care about correctness!",
     "typeof checks repeat everywhere the value travels.",
     "In ReScript the type is known at compile time, so the check disappears.",
     "A non-string can never reach shout.",
     "let shout = (value: string) => value->String.toUpperCase"),
   tags=("types", "runtime-checks"), related=("ts-any", "string-union-type"),
   objectives=("Move runtime type checks to compile time",),
   mistakes=("typeof null === \"object\"",),
   practices=("Validate once at the boundary, then trust the types",))

_p("ts-any", "any type", "TypeSafety", "Intermediate",
   r":\s*any\b", 0.8,
   "function process(data: any) {\n  return data.items.length;\n}",
   "type payload = {items: array<item>}\nlet process = (data: payload) => data.items->Array.length",
   N("You're using TypeScript, which means types already matter to you!",
     "any switches the checker off, and the bugs come back with it.",
     "ReScript has no any. Describe the shape once with a record type.",
     "Every access on data is checked against payload.",
     "let process = (data: payload) => data.items->Array.length"),
   tags=("types", "any"), related=("typeof-check", "ts-interface"),
   objectives=("Replace any with a concrete type",),
   mistakes=("Using any to silence an error instead of fixing it",),
   practices=("Decode unknown JSON into a typed record at the edge",))

# ============================================================
# MODULES
# ============================================================

_p("es-import", "ES module import", "Modules", "Beginner",
   r"\bimport\s+(?:[\w*{}\s,]{1,300}\s+from\s+)?['\"][^'\"\n]{1,200}['\"]", 0.9,
   "import { formatDate } from \"./utils\";",
   "let formatted = Utils.formatDate(date)",
   N("Splitting code into modules keeps things organized. Nice structure!",
     "Import paths break when files move, and names can shadow each other.",
     "In ReScript every file is a module; refer to Utils.formatDate directly.",
     "The compiler resolves every module reference; no broken paths at runtime.",
     "Utils.formatDate(date)"),
   tags=("modules", "imports"), related=("commonjs-require",),
   objectives=("Use file-level modules",),
   mistakes=("Circular imports",),
   practices=("Use open sparingly, prefer qualified names",))

_p("commonjs-require", "CommonJS require", "Modules", "Beginner",
   r"\brequire\s*\(\s*['\"][^'\"]+['\"]\s*\)", 0.9,
   "const fs = require(\"fs\");",
   "@module(\"fs\") external readFileSync: (string, string) => string = \"readFileSync\"",
   N("You know your way around Node's module system!",
     "require returns whatever the module exports, untyped.",
     "ReScript binds exactly the functions you use with external, each with a type.",
     "Call readFileSync with the wrong arguments and it won't compile.",
     "@module(\"fs\") external readFileSync: (string, string) => string = \"readFileSync\""),
   tags=("modules", "bindings", "node"), related=("es-import",),
   objectives=("Write typed bindings with external",),
   mistakes=("Binding the whole module as any",),
   practices=("Keep bindings in one Bindings module",))

# ============================================================
# IMMUTABILITY
# ============================================================

_p("object-spread", "Object spread update", "Immutability", "Intermediate",
   r"\{\s*\.\.\.\w+", 0.9,
   "const updated = { ...user, name: \"Grace\" };",
   "let updated = {...user, name: \"Grace\"}",
   N("Spreading into a new object instead of mutating. You get immutability!",
     "Spread happily accepts keys the object never had, like nmae.",
     "ReScript's record update syntax is the same, but only known fields are allowed.",
     "A typo in a field name fails to compile.",
     "{...user, name: \"Grace\"}"),
   tags=("immutability", "records", "spread"), related=("object-freeze",),
   objectives=("Update records immutably",),
   mistakes=("Assuming spread does a deep copy",),
   practices=("Keep records flat so updates stay simple",))

_p("object-freeze", "Object.freeze", "Immutability", "Intermediate",
   r"\bObject\.freeze\s*\(", 0.95,
   "const CONFIG = Object.freeze({ debug: false });",
   "let config = {debug: false}",
   N("Freezing objects means you want values that don't change. Love it!",
     "freeze is shallow and only enforced at runtime.",
     "ReScript records are immutable by default, all the way down, at compile time.",
     "Assigning to config.debug is a compile error unless the field is declared mutable.",
     "let config = {debug: false}"),
   tags=("immutability", "freeze"), related=("object-spread",),
   objectives=("Rely on immutable-by-default records",),
   mistakes=("Expecting freeze to be deep",),
   practices=("Mark the rare mutable field explicitly",))

# ============================================================
# PIPES
# ============================================================

_p("method-chaining", "Method chaining", "PipeOperator", "Intermediate",
   r"\)\s*\.\w+\s*\([^)]*\)\s*\.\w+\s*\(", 0.75,
   "const result = items.filter(x => x.ok).map(x => x.id).join(\",\");",
   "let result = items->Array.filter(x => x.ok)->Array.map(x => x.id)->Array.join(\",\")",
   N("Chaining reads top to bottom. You already think in pipelines!",
     "Chaining only works with methods the object happens to have.",
     "The -> pipe works with any function, so your own helpers join the chain too.",
     "Each step's output type must fit the next step's input.",
     "items->Array.filter(x => x.ok)->Array.map(x => x.id)"),
   tags=("pipe", "chaining"), related=("nested-calls", "array-map"),
   objectives=("Pipe data through plain functions",),
   mistakes=("Chaining on a value that may be undefined",),
   practices=("Put one step per line in long pipes",))

_p("nested-calls", "Nested function calls", "PipeOperator", "Intermediate",
   r"\b\w+\(\s*\w+\(\s*\w+\(", 0.7,
   "const out = format(trim(parse(input)));",
   "let out = input->parse->trim->format",
   N("Composing small functions is great design!",
     "Nested calls read inside out, the opposite of the order they run.",
     "The -> pipe lets you write them in the order they happen.",
     "Each stage is type-checked against the next.",
     "input->parse->trim->format"),
   tags=("pipe", "composition"), related=("method-chaining", "curried-function"),
   objectives=("Rewrite nested calls as pipes",),
   mistakes=("Nesting so deep the arguments get lost",),
   practices=("Design functions data-first",))

# ============================================================
# OOP -> FP
# ============================================================

_p("this-mutation", "Mutating this", "OopToFp", "Intermediate",
   r"\bthis\.\w+\s*(?:=(?!=)|\+=|-=|\+\+|--)", 0.8,
   "class Counter {\n  increment() { this.count += 1; }\n}",
   "let increment = counter => {...counter, count: counter.count + 1}",
   N("Encapsulating state in a class is solid engineering!",
     "Hidden mutation through this makes it hard to know who changed what.",
     "Return a new record from a plain function instead.",
     "Old values stay valid, so nothing changes under your feet.",
     "let increment = c => {...c, count: c.count + 1}"),
   tags=("oop", "mutation", "state"), related=("class-inheritance", "class-data-holder"),
   objectives=("Replace methods that mutate with functions that return",),
   mistakes=("Losing this inside callbacks",),
   practices=("Keep state in records, behaviour in modules",))

_p("class-inheritance", "Class inheritance", "OopToFp", "Advanced",
   r"\bclass\s+\w+\s+extends\s+\w+", 0.95,
   "class Dog extends Animal {\n  speak() { return \"woof\"; }\n}",
   "type animal = Dog | Cat\nlet speak = a => switch a { | Dog => \"woof\" | Cat => \"meow\" }",
   N("You're modeling a family of related things. Good domain thinking!",
     "Inheritance spreads behaviour across a hierarchy and new subclasses can forget an override.",
     "A variant plus a switch keeps all the cases in one place.",
     "Add a case and every switch that forgets it fails to compile.",
     "let speak = a => switch a { | Dog => \"woof\" | Cat => \"meow\" }"),
   tags=("oop", "inheritance", "variants"), related=("this-mutation", "string-union-type"),
   objectives=("Model hierarchies as variants",),
   mistakes=("Deep hierarchies for code reuse",),
   practices=("Compose small functions instead of extending classes",))

_p("class-data-holder", "Class as data holder", "ClassToRecord", "Intermediate",
   r"\bclass\s+\w+\s*\{\s*constructor\s*\(", 0.85,
   "class Point {\n  constructor(x, y) { this.x = x; this.y = y; }\n}",
   "type point = {x: float, y: float}\nlet origin = {x: 0.0, y: 0.0}",
   N("Grouping related data together is the heart of good modeling!",
     "A class for plain data brings constructors, this and new along for the ride.",
     "A ReScript record is just the data, with a type.",
     "Records are immutable and structurally checked.",
     "let p = {x: 1.0, y: 2.0}"),
   tags=("classes", "records"), related=("ts-interface", "this-mutation"),
   objectives=("Use records for plain data",),
   mistakes=("Forgetting new",),
   practices=("Functions over data, in a module next to the type",))

# ============================================================
# CALLBACKS
# ============================================================

_p("node-callback", "Error-first callback", "Callbacks", "Intermediate",
   r"\(\s*err(?:or)?\s*,\s*\w+\s*\)\s*=>|\bfunction\b\s*(?:\w+\s*)?\(\s*err(?:or)?\s*,", 0.9,
   "fs.readFile(path, (err, data) => {\n  if (err) return done(err);\n  done(null, data);\n});",
   "let read = path => Promise.make((resolve, _) =>\n  readFile(path, (err, data) => resolve(err->Nullable.isNullable ? Ok(data) : Error(err))))",
   N("Error-first callbacks! You handle the error before the data. Disciplined.",
     "Nothing forces anyone to check err, and callback nesting piles up.",
     "Wrap the API once and hand back promise<result<'a, 'e>>.",
     "The result type makes the error case impossible to ignore.",
     "read(path)->Promise.thenResolve(r => switch r { | Ok(d) => d | Error(_) => \"\" })"),
   tags=("callbacks", "node", "errors"), related=("new-promise", "event-listener"),
   objectives=("Convert callbacks to promises of results",),
   mistakes=("Callback hell from nested error-first calls",),
   practices=("Wrap each callback API once",))

_p("event-listener", "Event listener", "Callbacks", "Beginner",
   r"\.addEventListener\s*\(", 0.9,
   "button.addEventListener(\"click\", () => save());",
   "button->Element.addEventListener(\"click\", _ => save())",
   N("Event-driven code! You're thinking about how users interact.",
     "The event object is untyped, so event.target.value is a guess.",
     "ReScript DOM bindings type the event for each listener.",
     "Accessing a property the event doesn't have won't compile.",
     "button->Element.addEventListener(\"click\", _ => save())"),
   tags=("callbacks", "dom", "events"), related=("node-callback",),
   objectives=("Use typed DOM bindings",),
   mistakes=("Never removing listeners",),
   practices=("Keep handlers small and pure-ish",))

# ============================================================
# DATA MODELING
# ============================================================

_p("ts-interface", "TypeScript interface", "DataModeling", "Intermediate",
   r"\binterface\s+\w+\s*\{", 0.95,
   "interface User {\n  name: string;\n  email?: string;\n}",
   "type user = {name: string, email: option<string>}",
   N("Interfaces mean you describe your data up front. Excellent habit!",
     "Optional fields with ? still let undefined leak everywhere.",
     "A ReScript record with option fields says exactly what may be missing.",
     "You can't read email as a string without handling None.",
     "type user = {name: string, email: option<string>}"),
   tags=("types", "records", "modeling"), related=("class-data-holder", "ts-any"),
   objectives=("Model data with records and options",),
   mistakes=("Making every field optional",),
   practices=("One type per concept, defined next to its functions",))

_p("json-parse", "JSON.parse", "DataModeling", "Advanced",
   r"\bJSON\.parse\s*\(", 0.9,
   "const user = JSON.parse(body);",
   "let user = body->JSON.parseExn->decodeUser",
   N("You're working with real data from the outside world!",
     "JSON.parse returns any and the shape is taken on faith.",
     "Parse, then decode into a typed record, handling failure as a result.",
     "Malformed payloads become Error values instead of crashes three calls later.",
     "switch body->JSON.parseExn->decodeUser { | Ok(u) => u | Error(e) => ... }"),
   tags=("json", "decoding", "boundaries"), related=("ts-any", "try-catch"),
   objectives=("Decode untrusted JSON into typed values",),
   mistakes=("Trusting parsed JSON without validation",),
   practices=("Decode at the boundary, once",))


BUILTIN_PATTERNS = tuple(_PATTERNS)


def default_catalog() -> PatternCatalog:
    """the built-in catalog, in teaching order."""
    return PatternCatalog(BUILTIN_PATTERNS)
