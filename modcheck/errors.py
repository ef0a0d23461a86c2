class ModulesCheckError(Exception):
    """Base class for all modules-check exceptions"""

class NotFoundError(ModulesCheckError):
    pass

class ParseError(ModulesCheckError):
    pass

class RegistryLookupError(ModulesCheckError):
    pass

class BackupError(ModulesCheckError):
    pass

class WriteError(ModulesCheckError):
    pass

class InstallError(ModulesCheckError):
    pass
