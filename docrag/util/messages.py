""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "DOCUMENT_UPLOADED"         :   "Successfully uploaded and processed: {file_name}",
    "DOCUMENTS_ADDED"           :   "Successfully added {count} documents",
    "DOCUMENTS_LISTED"          :   "{count} documents available for selection",
    "DOCUMENTS_FOUND"           :   "Found {count} documents",
    "DOCUMENT_DELETED"          :   "Document {document_id} deleted successfully",
    "DOCUMENTS_CLEARED"         :   "All documents cleared successfully"
}


# ERROR MESSAGES
ERROR = {
    # Upload Errors
    "NO_FILE_UPLOADED"          :   "No file uploaded",
    "INVALID_FILE_NAME"         :   "Invalid file name.",
    "FILE_TYPE_NOT_SUPPORTED"   :   "File type not supported. Received: {mime_type} ({extension}). Allowed extensions: {allowed}",
    "FILE_TOO_LARGE"            :   "File too large. Maximum size is {max_mb}MB.",
    "INVALID_TAGS"              :   "Tags must be a JSON array of strings or a comma separated list.",
    "DOCUMENT_UPLOAD_FAILED"    :   "Unable to upload document. Please try again.",

    # Add Documents Errors
    "DOCUMENTS_REQUIRED"        :   "documents must be a non-empty array",
    "DOCUMENT_CONTENT_REQUIRED" :   "Each document needs non-empty content.",
    "DOCUMENT_SOURCE_REQUIRED"  :   "Each document needs metadata.source.",
    "DOCUMENT_ID_EXISTS"        :   "A document with id {document_id} already exists.",
    "DOCUMENTS_ADD_FAILED"      :   "Unable to add documents.",

    # Document Errors
    "DOCUMENT_NOT_FOUND"        :   "Document not found",
    "DOCUMENT_DELETE_FAILED"    :   "Unable to delete document.",
    "DOCUMENTS_CLEAR_FAILED"    :   "Unable to clear documents.",
    "TEXT_EXTRACTION_FAILED"    :   "Could not extract text from {file_name}.",
    "EMBEDDING_FAILED"          :   "Could not generate embeddings for the document.",

    # Query Errors
    "INVALID_REQUEST"           :   "Request body is required",
    "MISSING_PROMPT"            :   "prompt is required",
    "INVALID_PROMPT"            :   "prompt must be a non-empty string",
    "INVALID_STRING_LIST"       :   "{field} must be an array of strings",
    "INVALID_BOOLEAN"           :   "{field} must be a boolean",
    "INVALID_FORMAT_DIRECTIVE"  :   "outputFormatDirective must be a string",

    # Query Responses (not errors, surfaced as answers)
    "NO_RELEVANT_INFORMATION"   :   "I couldn't find relevant information in the uploaded documents to answer your question.",
    "QUERY_DEGRADED"            :   "I apologize, but I encountered an error while processing your query: {reason}. Please try again.",

    # Provider Errors
    "UNSUPPORTED_AI_PROVIDER"   :   "Unsupported AI_PROVIDER='{provider}'. Allowed values: 'sambanova', 'anthropic'.",
    "ANTHROPIC_KEY_MISSING"     :   "ANTHROPIC_API_KEY must be set when AI_PROVIDER=anthropic."
}
