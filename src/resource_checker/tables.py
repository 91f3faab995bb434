from __future__ import annotations

from resource_checker.models import ClassifierTables


# Keys that are required even though no code string names them.
KNOWN_REQUIRED = (
    # See Resolve.getErrorKey
    "compiler.err.cant.resolve.args",
    "compiler.err.cant.resolve.args.params",
    "compiler.err.cant.resolve.location.args",
    "compiler.err.cant.resolve.location.args.params",
    "compiler.misc.cant.resolve.location.args",
    "compiler.misc.cant.resolve.location.args.params",
    # JavaCompiler, reports #errors and #warnings
    "compiler.misc.count.error",
    "compiler.misc.count.error.plural",
    "compiler.misc.count.warn",
    "compiler.misc.count.warn.plural",
    # Used for LintCategory
    "compiler.warn.lintOption",
    # Other
    "compiler.misc.base.membership",  # (sic)
)

# Keys that look unused but still need a closer look.
NEED_TO_INVESTIGATE = (
    "compiler.misc.fatal.err.cant.close.loader",  # suppressed by JSR308
    "compiler.err.cant.read.file",  # unused
    "compiler.err.illegal.self.ref",  # unused
    "compiler.err.io.exception",  # unused
    "compiler.err.limit.pool.in.class",  # unused
    "compiler.err.name.reserved.for.internal.use",  # unused
    "compiler.err.no.match.entry",  # unused
    "compiler.err.not.within.bounds.explain",  # unused
    "compiler.err.signature.doesnt.match.intf",  # unused
    "compiler.err.signature.doesnt.match.supertype",  # unused
    "compiler.err.type.var.more.than.once",  # unused
    "compiler.err.type.var.more.than.once.in.result",  # unused
    "compiler.misc.non.denotable.type",  # unused
    "compiler.misc.unnamed.package",  # should be required, CR 6964147
    "compiler.warn.proc.type.already.exists",  # JavacFiler
    "javac.opt.arg.class",  # unused?
    "javac.opt.arg.pathname",  # unused?
    "javac.opt.moreinfo",  # option commented out
    "javac.opt.nogj",  # unused
    "javac.opt.printsearch",  # option commented out
    "javac.opt.prompt",  # option commented out
    "javac.opt.s",  # option commented out
)

# Code strings that look like key fragments but are not.
NO_RESOURCE_REQUIRED = (
    # module names
    "jdk.compiler",
    "jdk.javadoc",
    # system properties
    "application.home",
    "env.class.path",
    "line.separator",
    "os.name",
    "user.dir",
    # file names
    "ct.sym",
    "rt.jar",
    "jfxrt.jar",
    "module-info.class",
    "module-info.sig",
    "jrt-fs.jar",
    # -XD option names
    "process.packages",
    "ignore.symbol.file",
    "fileManager.deferClose",
    # prefix/embedded strings
    "compiler.",
    "compiler.misc.",
    "compiler.misc.tree.tag.",
    "opt.Xlint.desc.",
    "count.",
    "illegal.",
    "java.",
    "javac.",
    "verbose.",
    "locn.",
)

DEFAULT_LINT_OPTIONS = frozenset(
    {
        "auxiliaryclass",
        "cast",
        "classfile",
        "dangling-doc-comments",
        "dep-ann",
        "deprecation",
        "divzero",
        "empty",
        "exports",
        "fallthrough",
        "finally",
        "identity",
        "incubating",
        "lossy-conversions",
        "missing-explicit-ctor",
        "module",
        "opens",
        "options",
        "output-file-clash",
        "overloads",
        "overrides",
        "path",
        "preview",
        "processing",
        "rawtypes",
        "removal",
        "requires-automatic",
        "requires-transitive-automatic",
        "restricted",
        "serial",
        "static",
        "strictfp",
        "synchronization",
        "text-blocks",
        "this-escape",
        "try",
        "unchecked",
        "varargs",
    }
)

DEFAULT_TABLES = ClassifierTables(
    known_required=frozenset(KNOWN_REQUIRED),
    need_to_investigate=frozenset(NEED_TO_INVESTIGATE),
    no_resource_required=frozenset(NO_RESOURCE_REQUIRED),
)
