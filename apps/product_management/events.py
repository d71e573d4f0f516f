PRODUCT_SAVED_EVENT = "product_saved"
